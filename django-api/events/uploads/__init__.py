from events.uploads.interfaces import AssetUploader
from events.uploads.storage import StorageAssetUploader

__all__ = ["AssetUploader", "StorageAssetUploader"]
