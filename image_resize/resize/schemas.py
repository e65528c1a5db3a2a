# image_resize/resize/schemas.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PayloadOrigin(str, Enum):
    MULTIPART = "multipart"
    RAW = "raw"


class ParseError(str, Enum):
    """Reasons a request body yields no usable image. Values are sent to the client."""

    EMPTY_PAYLOAD = "No image data provided"
    INVALID_BOUNDARY = "Invalid multipart boundary"
    NO_IMAGE_PART = "No image data found in multipart request"
    MALFORMED_PART = "Invalid multipart format"
    INCOMPLETE_BODY = "Incomplete multipart data"
    NO_IMAGE_DATA = "No image data found"


class RawRequest(BaseModel):
    content_type: str = ""
    body: bytes = b""
    width: int
    quality: int

    model_config = ConfigDict(frozen=True)


class ExtractedImage(BaseModel):
    data: bytes = Field(..., min_length=1)
    origin: PayloadOrigin

    model_config = ConfigDict(frozen=True)


class ResizeSpec(BaseModel):
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)


class ProcessedImage(BaseModel):
    data: bytes
    width: int
    height: int

    @property
    def size(self) -> int:
        return len(self.data)


class ResizeSuccessResponse(BaseModel):
    success: bool = True
    message: str = "Image resized and uploaded successfully"
    url: str
    blob_name: str
    size: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str
