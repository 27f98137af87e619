import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from .. import config
from ..exceptions import ImageIOError
from ..models import CameraMetadata
from .container import TagSet, decode_container


class MetadataExtractor:
    """
    Turns an image's EXIF block into a CameraMetadata record.

    Individual tags that are missing or malformed simply leave their field
    empty. Only a failure to read or decode the container itself is raised.
    """

    def get_image_metadata(self, path: Path) -> CameraMetadata:
        path = Path(path)
        try:
            with path.open('rb') as f:
                tags = decode_container(f, path)
        except OSError as e:
            raise ImageIOError(path, e) from e

        return self.normalize(tags)

    def normalize(self, tags: TagSet) -> CameraMetadata:
        """Builds CameraMetadata from a decoded tag set. Never raises for bad tags."""
        converters = {
            'uint': self._tag_uint,
            'datetime': self._tag_datetime,
            'text': self._tag_text,
        }

        values = {}
        for field_name, tag_name, kind in config.CAMERA_FIELDS:
            tag = tags.get(tag_name)
            if tag is None:
                logging.debug(f"Tag {tag_name} not present")
                continue
            values[field_name] = converters[kind](tag)

        return CameraMetadata(**values)

    # --- Tag Converters ---

    def _tag_uint(self, tag: Any) -> Optional[int]:
        """First value of a numeric tag, if it is a non-negative integer."""
        values = getattr(tag, 'values', None)
        if isinstance(values, (list, tuple)):
            values = values[0] if values else None
        if isinstance(values, int) and not isinstance(values, bool) and values >= 0:
            return values
        return None

    def _tag_datetime(self, tag: Any) -> Optional[datetime]:
        """Parses an EXIF 'YYYY:MM:DD HH:MM:SS' string into a naive datetime."""
        raw = self._tag_text(tag)
        if raw is None:
            return None
        try:
            return datetime.strptime(raw, config.EXIF_DATE_FORMAT)
        except ValueError:
            logging.debug(f"Unparseable EXIF date: {raw!r}")
            return None

    def _tag_text(self, tag: Any) -> Optional[str]:
        """
        Reads an ASCII tag from its raw value rather than the printable form,
        which can add quoting or escapes around padded strings.
        """
        values = getattr(tag, 'values', None)
        if isinstance(values, (bytes, bytearray)):
            # exifread leaves the bytes undecoded when they are not valid UTF-8
            return bytes(values).decode('utf-8', errors='replace')
        if isinstance(values, str):
            return values
        if tag is None:
            return None
        return str(tag)
