# image_resize/resize/payload.py
import logging
from typing import Union

from .constants import MULTIPART_CONTENT_TYPE
from .multipart import extract_image_part, parse_boundary
from .schemas import ExtractedImage, ParseError, PayloadOrigin

logger = logging.getLogger(__name__)


def is_multipart(content_type: str) -> bool:
    return MULTIPART_CONTENT_TYPE in (content_type or "")


def resolve_payload(content_type: str, body: bytes) -> Union[ExtractedImage, ParseError]:
    """Pick the image bytes out of a request body.

    Multipart bodies are scanned for their first image part; anything else is
    taken verbatim as the image.
    """
    if is_multipart(content_type):
        boundary = parse_boundary(content_type)
        if boundary is None:
            return ParseError.INVALID_BOUNDARY

        extracted = extract_image_part(body, boundary)
        if isinstance(extracted, ParseError):
            return extracted

        logger.info("Extracted %d bytes of image data from multipart form", len(extracted))
        data, origin = extracted, PayloadOrigin.MULTIPART
    else:
        logger.info("Received %d bytes of raw image data", len(body or b""))
        data, origin = body, PayloadOrigin.RAW

    if not data:
        return ParseError.EMPTY_PAYLOAD

    return ExtractedImage(data=data, origin=origin)
