"""Cache keys shared by handlers and invalidation signals."""

PUBLIC_EVENTS_KEY = "events:public"
