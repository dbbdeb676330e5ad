from events.handlers.views import (
    EventAssetListView,
    EventAssetUploadView,
    EventCreateView,
    EventJoinView,
    EventMemberListView,
    NearbyEventListView,
    PublicEventListView,
)

__all__ = [
    "EventAssetListView",
    "EventAssetUploadView",
    "EventCreateView",
    "EventJoinView",
    "EventMemberListView",
    "NearbyEventListView",
    "PublicEventListView",
]
