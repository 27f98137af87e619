import io
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union, BinaryIO

import exifread

from ..exceptions import ContainerFormatError, ImageIOError


class TagSet:
    """
    Read-only view over the tags exifread decoded from one file.
    Keys are exifread names such as 'Image Model' or 'EXIF DateTimeOriginal'.
    """

    def __init__(self, tags: Dict[str, Any]):
        self._tags = dict(tags)

    def get(self, tag_name: str) -> Optional[Any]:
        return self._tags.get(tag_name)

    def __contains__(self, tag_name: str) -> bool:
        return tag_name in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)


class _ReadGuard:
    """
    Passes reads through to the wrapped handle and notes when one comes back
    short. Header-sized reads that run off the end mean a tag pointed outside
    the data, which exifread would otherwise decode as zeros or empty text.
    """

    # IFD entries are 12 bytes; inline values and offsets are at most 8
    STRUCT_READ_SIZE = 12

    def __init__(self, fh: BinaryIO):
        self._fh = fh
        self.truncated = False

    def read(self, size: int = -1) -> bytes:
        data = self._fh.read(size)
        if size and size > 0 and len(data) < size:
            if not data or size <= self.STRUCT_READ_SIZE:
                self.truncated = True
        return data

    def __getattr__(self, name):
        return getattr(self._fh, name)


def decode_container(source: Union[bytes, BinaryIO], path: Union[str, Path] = "<bytes>") -> TagSet:
    """
    Parses the EXIF container in `source` (raw bytes or a binary file object).

    Raises:
        ContainerFormatError: no EXIF block was found or it could not be parsed.
        ImageIOError: the underlying read failed.
    """
    fh = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    guard = _ReadGuard(fh)

    try:
        # details=False skips MakerNotes, none of our tags live there
        tags = exifread.process_file(guard, details=False, strict=True)
    except OSError as e:
        raise ImageIOError(path, e) from e
    except Exception as e:
        # exifread surfaces truncated/garbled blocks as assorted parse errors
        raise ContainerFormatError(path, f"Invalid EXIF data: {e}", cause=e) from e

    if not tags:
        raise ContainerFormatError(path, "No EXIF data found")

    if guard.truncated:
        raise ContainerFormatError(path, "Truncated EXIF data")

    logging.debug(f"Decoded {len(tags)} EXIF tags from {path}")
    return TagSet(tags)
