from django.contrib import admin

from events.models import Asset, Event, Location, Participation


class ParticipationInline(admin.TabularInline):
    model = Participation
    extra = 0
    readonly_fields = ["joined_at"]


class AssetInline(admin.TabularInline):
    model = Asset
    extra = 0
    readonly_fields = ["name", "url", "created_at"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "creator", "start_date", "end_date", "is_private"]
    list_filter = ["is_private"]
    search_fields = ["title", "description"]
    inlines = [ParticipationInline, AssetInline]


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ["name", "latitude", "longitude", "created_at"]
    search_fields = ["name"]


@admin.register(Asset)
class AssetAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "url", "created_at"]
    list_filter = ["event"]
