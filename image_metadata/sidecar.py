"""
JSON sidecar output.

The sidecar sits next to the image with the same stem and a .json suffix.
Keys are written in a fixed order and fields without a value are left out.
"""
import json
import logging
from dataclasses import fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from . import config
from .exceptions import ImageIOError, SidecarFormatError
from .models import CameraMetadata, CombinedRecord, FileAttributes


def sidecar_path(path) -> Path:
    """image.jpg -> image.json, in the same directory."""
    return Path(path).with_suffix(config.SIDECAR_SUFFIX)


def record_to_dict(record: CombinedRecord) -> Dict[str, Any]:
    """Flattens a record into an ordered dict of JSON-ready values."""
    out: Dict[str, Any] = {}
    for name in config.FILE_FIELDS:
        _put(out, name, getattr(record.file_attributes, name))
    for name, _, _ in config.CAMERA_FIELDS:
        _put(out, name, getattr(record.camera_metadata, name))
    return out


def _put(out: Dict[str, Any], name: str, value: Any):
    if value is None:
        return
    if isinstance(value, datetime):
        value = _format_datetime(value)
    out[name] = value


def _format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        # Camera wall-clock time, no offset
        return value.isoformat()
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def render_json(record: CombinedRecord) -> str:
    return json.dumps(record_to_dict(record), indent=config.JSON_INDENT, ensure_ascii=False)


def write_metadata(path, record: CombinedRecord):
    """
    Writes the record as JSON to `path`, replacing any existing file.

    A failure part-way through can leave a truncated file behind; it is
    reported but not cleaned up.
    """
    path = Path(path)
    payload = render_json(record)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(payload)
            f.flush()
    except OSError as e:
        raise ImageIOError(path, e) from e
    logging.debug(f"Wrote {path}")


def load_metadata(path) -> CombinedRecord:
    """Reads a sidecar written by write_metadata back into a record."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ImageIOError(path, e) from e
    except ValueError as e:
        raise SidecarFormatError(path, f"Invalid JSON: {e}") from e

    if not isinstance(data, dict) or not _is_uint(data.get('size')):
        raise SidecarFormatError(path, "Field 'size' must be a non-negative integer")

    for name, _, kind in config.CAMERA_FIELDS:
        value = data.get(name)
        if value is None:
            continue
        if kind == 'uint' and not _is_uint(value):
            raise SidecarFormatError(path, f"Field '{name}' must be a non-negative integer")
        if kind in ('text', 'datetime') and not isinstance(value, str):
            raise SidecarFormatError(path, f"Field '{name}' must be a string")
    if data.get('filename') is not None and not isinstance(data['filename'], str):
        raise SidecarFormatError(path, "Field 'filename' must be a string")

    try:
        file_attrs = FileAttributes(
            filename=data.get('filename'),
            size=data['size'],
            created_time=_parse_datetime(data.get('created_time')),
            modified_time=_parse_datetime(data.get('modified_time')),
        )
        camera_names = {f.name for f in fields(CameraMetadata)}
        camera = {k: v for k, v in data.items() if k in camera_names}
        if 'capture_time' in camera:
            camera['capture_time'] = _parse_datetime(camera['capture_time'])
    except (TypeError, ValueError) as e:
        raise SidecarFormatError(path, f"Invalid timestamp: {e}") from e

    return CombinedRecord(file_attributes=file_attrs, camera_metadata=CameraMetadata(**camera))


def _parse_datetime(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


def _is_uint(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
