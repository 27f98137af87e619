from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

@dataclass(frozen=True)
class FileAttributes:
    """
    Filesystem-level facts about a file.
    """
    size: int
    filename: Optional[str] = None

    # Not every platform/filesystem records these
    created_time: Optional[datetime] = None     # aware, UTC
    modified_time: Optional[datetime] = None    # aware, UTC


@dataclass(frozen=True)
class CameraMetadata:
    """
    Values read from the image's embedded EXIF block.
    Every field is independent; a missing tag only blanks its own field.
    """
    orientation: Optional[int] = None
    capture_time: Optional[datetime] = None     # naive, camera wall-clock
    camera_model: Optional[str] = None
    camera_serial: Optional[str] = None


@dataclass(frozen=True)
class CombinedRecord:
    """
    Everything written to the sidecar. Flattened to a single JSON object on output.
    """
    file_attributes: FileAttributes
    camera_metadata: CameraMetadata = field(default_factory=CameraMetadata)
