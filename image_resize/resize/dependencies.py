# image_resize/resize/dependencies.py
from typing import Callable

from image_resize.upload.config import UploadSettings
from image_resize.upload.service import BlobUploader

UploaderFactory = Callable[[UploadSettings], BlobUploader]


def get_uploader_factory() -> UploaderFactory:
    return BlobUploader.from_settings
