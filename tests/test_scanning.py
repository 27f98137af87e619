import errno
from datetime import datetime, timezone

import pytest

from image_metadata.exceptions import ImageIOError
from image_metadata.scanning.filesystem import read_file_attributes


def test_size_matches_byte_length(tmp_path):
    p = tmp_path / "sample.bin"
    data = b"hello world" * 10
    p.write_bytes(data)

    attrs = read_file_attributes(p)
    assert attrs.size == len(data)
    assert attrs.filename == "sample.bin"


def test_empty_file(tmp_path):
    p = tmp_path / "empty.jpg"
    p.touch()
    assert read_file_attributes(p).size == 0


def test_timestamps_are_sane(tmp_path):
    p = tmp_path / "fresh.jpg"
    p.write_bytes(b"data")

    attrs = read_file_attributes(p)
    t_2020 = datetime(2020, 1, 1, tzinfo=timezone.utc)
    now = datetime.now(timezone.utc)

    # Modification time is reported everywhere; creation time depends on the platform
    assert attrs.modified_time is not None
    for t in (attrs.created_time, attrs.modified_time):
        if t is None:
            continue
        assert t.tzinfo is not None
        assert t_2020 < t <= now


def test_missing_birthtime_is_not_an_error(tmp_path, monkeypatch):
    p = tmp_path / "x.jpg"
    p.write_bytes(b"x")

    class FakeStat:
        st_size = 1
        st_mtime = 1_600_000_000.0

    monkeypatch.setattr(type(p), "stat", lambda self, **kw: FakeStat())

    attrs = read_file_attributes(p)
    assert attrs.created_time is None
    assert attrs.modified_time == datetime(2020, 9, 13, 12, 26, 40, tzinfo=timezone.utc)


def test_missing_file_raises_not_found(tmp_path):
    with pytest.raises(ImageIOError) as exc_info:
        read_file_attributes(tmp_path / "nope.jpg")

    err = exc_info.value
    assert err.errno == errno.ENOENT
    assert err.path == tmp_path / "nope.jpg"
    assert isinstance(err.__cause__, FileNotFoundError)
