# image_resize/resize/multipart.py
"""Minimal multipart/form-data scanning.

Only the first part declaring an ``image/*`` content type is located; other
fields, part ordering and nested multiparts are not interpreted. All searches
are forward ``bytes.find`` scans from a known offset, so the whole body is
walked at most once per marker.
"""
from typing import Optional, Union

from .constants import BOUNDARY_PARAM, HEADER_TERMINATOR, IMAGE_PART_MARKER
from .schemas import ParseError


def parse_boundary(content_type: str) -> Optional[str]:
    """Return the boundary token declared in a Content-Type value, or None."""
    index = content_type.find(BOUNDARY_PARAM)
    if index < 0:
        return None

    token = content_type[index + len(BOUNDARY_PARAM):].split(";", 1)[0]
    token = token.strip().strip('"')
    if not token or not token.isascii():
        return None
    return token


def boundary_delimiter(boundary: str) -> bytes:
    return b"\r\n--" + boundary.encode("ascii")


def extract_image_part(body: bytes, boundary: str) -> Union[bytes, ParseError]:
    marker_index = body.find(IMAGE_PART_MARKER)
    if marker_index < 0:
        return ParseError.NO_IMAGE_PART

    header_end = body.find(HEADER_TERMINATOR, marker_index)
    if header_end < 0:
        return ParseError.MALFORMED_PART
    data_start = header_end + len(HEADER_TERMINATOR)

    delimiter_start = body.find(boundary_delimiter(boundary), data_start)
    if delimiter_start < 0:
        return ParseError.INCOMPLETE_BODY

    if delimiter_start - data_start <= 0:
        return ParseError.NO_IMAGE_DATA

    return body[data_start:delimiter_start]
