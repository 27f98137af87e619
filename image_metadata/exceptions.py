"""
Custom exception hierarchy for the image metadata extractor.

Every error carries the path being processed so the CLI can report it
without re-running anything.
"""
from pathlib import Path
from typing import Optional


class ImageMetadataError(Exception):
    """Base exception for all image metadata errors."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = Path(path)


class ImageIOError(ImageMetadataError):
    """Raised when a stat/open/read/write/flush on the filesystem fails."""

    def __init__(self, path, cause: OSError):
        super().__init__(path, cause.strerror or str(cause))
        self.cause = cause

    @property
    def errno(self) -> Optional[int]:
        return self.cause.errno


class ContainerFormatError(ImageMetadataError):
    """Raised when the EXIF container is missing, truncated or invalid."""

    def __init__(self, path, message: str, cause: Optional[Exception] = None):
        super().__init__(path, message)
        self.cause = cause


class SidecarFormatError(ImageMetadataError):
    """Raised when an existing JSON sidecar cannot be read back."""
