import dataclasses
from datetime import datetime, timezone

import pytest

from image_metadata.metadata.merge import merge
from image_metadata.models import CameraMetadata, FileAttributes


def test_merge_keeps_both_halves():
    attrs = FileAttributes(size=10, filename="a.jpg", modified_time=datetime(2021, 5, 1, tzinfo=timezone.utc))
    camera = CameraMetadata(orientation=3, camera_serial="S1")

    record = merge(attrs, camera)
    assert record.file_attributes is attrs
    assert record.camera_metadata is camera


def test_records_are_immutable():
    attrs = FileAttributes(size=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        attrs.size = 11

    camera = CameraMetadata()
    with pytest.raises(dataclasses.FrozenInstanceError):
        camera.orientation = 1


def test_camera_fields_all_optional():
    camera = CameraMetadata()
    assert all(getattr(camera, f.name) is None for f in dataclasses.fields(camera))
