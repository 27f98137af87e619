from ..models import CameraMetadata, CombinedRecord, FileAttributes


def merge(file_attrs: FileAttributes, camera_meta: CameraMetadata) -> CombinedRecord:
    """Pairs filesystem and camera metadata into the record that gets written out."""
    return CombinedRecord(file_attributes=file_attrs, camera_metadata=camera_meta)
