"""
Configuration constants for the image metadata extractor.
"""

# --- EXIF Tag Keys ---
# Keys as reported by exifread ("<IFD name> <tag name>").
ORIENTATION_TAG = 'Image Orientation'
CAPTURE_TIME_TAG = 'EXIF DateTimeOriginal'
CAMERA_MODEL_TAG = 'Image Model'
CAMERA_SERIAL_TAG = 'EXIF BodySerialNumber'

# Camera fields in output order: (field name, exifread key, value kind)
# Value kinds: 'uint', 'datetime', 'text'
CAMERA_FIELDS = [
    ('orientation', ORIENTATION_TAG, 'uint'),
    ('capture_time', CAPTURE_TIME_TAG, 'datetime'),
    ('camera_model', CAMERA_MODEL_TAG, 'text'),
    ('camera_serial', CAMERA_SERIAL_TAG, 'text'),
]

# --- Metadata Parsing ---
# EXIF format is always "YYYY:MM:DD HH:MM:SS"
EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"

# --- Output ---
# File attribute keys in output order; camera fields follow in CAMERA_FIELDS order
FILE_FIELDS = ['filename', 'size', 'created_time', 'modified_time']
SIDECAR_SUFFIX = ".json"
JSON_INDENT = 2
