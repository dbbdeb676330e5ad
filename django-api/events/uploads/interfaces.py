"""Uploader interface for asset bytes.

Uploaders own the naming contract: they choose a collision-resistant
filename inside the requested folder and report it back.
"""

from abc import ABC, abstractmethod

from django.core.files.uploadedfile import UploadedFile


class AssetUploader(ABC):
    """Interface for writing asset files to durable storage."""

    @abstractmethod
    def upload_file(self, file_part: UploadedFile, folder: str) -> str:
        """Write file_part under folder and return the generated filename.

        Raises:
            UploadFailedError: If the bytes could not be written.
        """
        ...

    @abstractmethod
    def delete_file(self, folder: str, name: str) -> None:
        """Remove a file previously written by upload_file."""
        ...
