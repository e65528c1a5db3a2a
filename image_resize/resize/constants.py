# image_resize/resize/constants.py
DEFAULT_WIDTH = 1200
DEFAULT_QUALITY = 80
MIN_QUALITY = 1
MAX_QUALITY = 100

MULTIPART_CONTENT_TYPE = "multipart/form-data"
BOUNDARY_PARAM = "boundary="

IMAGE_PART_MARKER = b"Content-Type: image/"
HEADER_TERMINATOR = b"\r\n\r\n"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS, GET",
    "Access-Control-Allow-Headers": "Content-Type, Accept",
    "Access-Control-Max-Age": "86400",
}
