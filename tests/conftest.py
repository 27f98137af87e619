import pytest
from PIL import Image

# EXIF tag ids
ORIENTATION = 0x0112
MODEL = 0x0110
EXIF_IFD = 0x8769
DATETIME_ORIGINAL = 0x9003
BODY_SERIAL = 0xA431


def make_jpeg(path, orientation=None, model=None, capture_time=None, serial=None, pad_to=None):
    """Writes a small JPEG carrying whichever EXIF tags are given."""
    exif = Image.Exif()
    if orientation is not None:
        exif[ORIENTATION] = orientation
    if model is not None:
        exif[MODEL] = model

    sub_ifd = {}
    if capture_time is not None:
        sub_ifd[DATETIME_ORIGINAL] = capture_time
    if serial is not None:
        sub_ifd[BODY_SERIAL] = serial
    if sub_ifd:
        exif[EXIF_IFD] = sub_ifd

    img = Image.new("RGB", (16, 16), "white")
    if len(exif):
        img.save(path, "JPEG", exif=exif)
    else:
        img.save(path, "JPEG")

    if pad_to is not None:
        # Trailing bytes after EOI are ignored by readers
        size = path.stat().st_size
        assert size <= pad_to
        with path.open("ab") as f:
            f.write(b"\x00" * (pad_to - size))
    return path


@pytest.fixture
def camera_jpeg(tmp_path):
    """A JPEG with the full set of tags the extractor reads."""
    return make_jpeg(
        tmp_path / "JAM19896.jpg",
        orientation=1,
        model="Canon EOS 5D Mark IV",
        capture_time="2019:07:26 13:25:33",
        serial="025021000537",
    )


@pytest.fixture
def plain_jpeg(tmp_path):
    """A JPEG with no EXIF block at all."""
    return make_jpeg(tmp_path / "plain.jpg")


@pytest.fixture
def jpeg_factory():
    """Exposes make_jpeg to tests that need custom tag combinations."""
    return make_jpeg
