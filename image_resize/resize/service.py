# image_resize/resize/service.py
import logging
import re
from typing import Optional

from starlette.concurrency import run_in_threadpool

from image_resize.exception import ConfigurationError, PayloadValidationError
from image_resize.upload.config import UploadSettings
from image_resize.upload.schemas import UploadResult
from image_resize.upload.service import generate_blob_name

from .constants import DEFAULT_QUALITY, DEFAULT_WIDTH
from .dependencies import UploaderFactory
from .payload import resolve_payload
from .pipeline import clamp_quality, process_image
from .schemas import ParseError, RawRequest

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only, surrounding whitespace allowed.
INT_PARAM_PATTERN = re.compile(r"\s*([+-]?[0-9]+)\s*")


def parse_int_param(value: Optional[str], default: int) -> int:
    """Lenient integer parsing for query parameters: anything unusable is ``default``."""
    if value is None:
        return default
    match = INT_PARAM_PATTERN.fullmatch(value)
    if match is None:
        return default
    return int(match.group(1))


def build_raw_request(
    content_type: Optional[str],
    body: bytes,
    width: Optional[str] = None,
    quality: Optional[str] = None,
) -> RawRequest:
    parsed_width = parse_int_param(width, DEFAULT_WIDTH)
    if parsed_width <= 0:
        parsed_width = DEFAULT_WIDTH

    return RawRequest(
        content_type=content_type or "",
        body=body,
        width=parsed_width,
        quality=clamp_quality(parse_int_param(quality, DEFAULT_QUALITY)),
    )


async def resize_and_upload(
    raw_request: RawRequest,
    upload_settings: UploadSettings,
    uploader_factory: UploaderFactory,
) -> UploadResult:
    resolved = resolve_payload(raw_request.content_type, raw_request.body)
    if isinstance(resolved, ParseError):
        raise PayloadValidationError(resolved)

    processed = await run_in_threadpool(
        process_image, resolved.data, width=raw_request.width, quality=raw_request.quality
    )

    if not upload_settings.is_configured:
        raise ConfigurationError("APP_BLOB_ACCOUNT not configured")

    container = upload_settings.APP_BLOB_CONTAINER
    blob_name = generate_blob_name()

    async with uploader_factory(upload_settings) as uploader:
        await uploader.ensure_container(container)
        url = await uploader.upload(container, blob_name, processed.data)

    return UploadResult(url=url, blob_name=blob_name, size=processed.size)
