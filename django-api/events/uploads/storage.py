"""AssetUploader backed by Django's file storage API."""

import logging
import os
import posixpath
import re
import uuid

from django.core.files.storage import Storage, default_storage
from django.core.files.uploadedfile import UploadedFile

from events.domain.errors import UploadFailedError
from events.uploads.interfaces import AssetUploader

logger = logging.getLogger(__name__)

_EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]{1,10}")


def generate_filename(original_name: str | None) -> str:
    """Return a random filename keeping the original extension."""
    _, extension = os.path.splitext(os.path.basename(original_name or "").strip())
    if not _EXTENSION_PATTERN.fullmatch(extension):
        extension = ""
    return f"{uuid.uuid4().hex}{extension.lower()}"


class StorageAssetUploader(AssetUploader):
    """Writes assets through a Django Storage (filesystem, S3, ...)."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage if storage is not None else default_storage

    def upload_file(self, file_part: UploadedFile, folder: str) -> str:
        target = posixpath.join(folder, generate_filename(file_part.name))
        try:
            saved = self._storage.save(target, file_part)
        except OSError as exc:
            logger.exception("Failed to write %s", target)
            raise UploadFailedError(folder) from exc
        # Storage may alter the name if it is taken; report what was written.
        name = posixpath.basename(saved)
        logger.debug("Stored %d bytes at %s/%s", file_part.size, folder, name)
        return name

    def delete_file(self, folder: str, name: str) -> None:
        self._storage.delete(posixpath.join(folder, name))
