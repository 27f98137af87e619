import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..exceptions import ImageIOError
from ..models import FileAttributes


def read_file_attributes(path) -> FileAttributes:
    """
    Reads size and timestamps for a single file.

    Creation time is only reported where os.stat exposes a birth time
    (macOS, BSD, Windows). Linux keeps one too, but only behind statx(2),
    which os.stat does not call, so it is left as None there.

    Raises:
        ImageIOError: if the path cannot be stat-ed at all.
    """
    path = Path(path)
    try:
        stat_result = path.stat()
    except OSError as e:
        raise ImageIOError(path, e) from e

    created = _to_utc(getattr(stat_result, 'st_birthtime', None))
    modified = _to_utc(stat_result.st_mtime)
    if created is None:
        logging.debug(f"No creation time available for {path}")

    return FileAttributes(
        filename=path.name,
        size=stat_result.st_size,
        created_time=created,
        modified_time=modified,
    )


def _to_utc(timestamp: Optional[float]) -> Optional[datetime]:
    if timestamp is None:
        return None
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        # Out of range for the platform's time functions
        return None
