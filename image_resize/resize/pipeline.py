# image_resize/resize/pipeline.py
import io
import logging

from PIL import Image

from image_resize.exception import DecodeError, EncodeError, InvalidImageDimensions, ProcessingError

from .constants import DEFAULT_QUALITY, DEFAULT_WIDTH, MAX_QUALITY, MIN_QUALITY
from .schemas import ProcessedImage, ResizeSpec

logger = logging.getLogger(__name__)

# Modes the JPEG encoder accepts as-is; everything else goes through RGB.
JPEG_MODES = ("RGB", "L")


def clamp_quality(quality: int) -> int:
    return max(MIN_QUALITY, min(MAX_QUALITY, quality))


def compute_resize_spec(width: int, source_width: int, source_height: int) -> ResizeSpec:
    """Target size for ``width`` that keeps the source aspect ratio."""
    if source_width <= 0 or source_height <= 0:
        raise InvalidImageDimensions(
            f"Invalid image dimensions: {source_width}x{source_height}"
        )
    if width < 1:
        raise InvalidImageDimensions(f"Invalid target width: {width}")

    height = round(width * source_height / source_width)
    return ResizeSpec(width=width, height=max(1, height))


def decode_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except Exception as e:
        raise DecodeError(str(e)) from e
    return image


def resize_image(image: Image.Image, spec: ResizeSpec) -> Image.Image:
    try:
        if image.mode not in JPEG_MODES:
            image = image.convert("RGB")
        if image.size == (spec.width, spec.height):
            return image
        return image.resize((spec.width, spec.height), Image.Resampling.LANCZOS)
    except Exception as e:
        raise ProcessingError(f"Failed to resize image: {str(e)}") from e


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    try:
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", quality=clamp_quality(quality), optimize=True)
    except Exception as e:
        raise EncodeError(f"Failed to encode image: {str(e)}") from e
    return buffer.getvalue()


def process_image(
    data: bytes,
    width: int = DEFAULT_WIDTH,
    quality: int = DEFAULT_QUALITY,
) -> ProcessedImage:
    """Decode ``data``, scale it to ``width`` and re-encode it as JPEG."""
    image = decode_image(data)
    logger.info("Loaded image: %dx%d", image.width, image.height)

    spec = compute_resize_spec(width, image.width, image.height)
    resized = resize_image(image, spec)
    encoded = encode_jpeg(resized, quality)

    logger.info("Image resized successfully: %dx%d", resized.width, resized.height)
    return ProcessedImage(data=encoded, width=resized.width, height=resized.height)
