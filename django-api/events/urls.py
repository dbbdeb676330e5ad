from django.urls import path

from events.handlers import (
    EventAssetListView,
    EventAssetUploadView,
    EventCreateView,
    EventJoinView,
    EventMemberListView,
    NearbyEventListView,
    PublicEventListView,
)

urlpatterns = [
    path("events/public", PublicEventListView.as_view(), name="event-public"),
    path("events/closeby", NearbyEventListView.as_view(), name="event-closeby"),
    path("events/create", EventCreateView.as_view(), name="event-create"),
    path(
        "events/<str:event_id>/members",
        EventMemberListView.as_view(),
        name="event-members",
    ),
    path(
        "events/<str:event_id>/assets",
        EventAssetListView.as_view(),
        name="event-assets",
    ),
    path(
        "events/<str:event_id>/upload",
        EventAssetUploadView.as_view(),
        name="event-upload",
    ),
    path("events/<str:event_id>/join", EventJoinView.as_view(), name="event-join"),
]
