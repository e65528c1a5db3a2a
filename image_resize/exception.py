# image_resize/exception.py
from fastapi import HTTPException, status


class ImageResizeError(HTTPException):
    """Base for every failure the resize endpoint reports as ``{"error": ...}``."""

    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(status_code=self.default_status, detail=message)

    @property
    def message(self) -> str:
        return str(self.detail)


class PayloadValidationError(ImageResizeError):
    default_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason):
        # reason is a ParseError; its value is the client-facing message
        super().__init__(reason.value)
        self.reason = reason


class ConfigurationError(ImageResizeError):
    pass


class ProcessingError(ImageResizeError):
    pass


class DecodeError(ProcessingError):
    pass


class InvalidImageDimensions(ProcessingError):
    pass


class EncodeError(ProcessingError):
    pass


class UploadError(ImageResizeError):
    pass
