# tests/conftest.py
import io
import os
import sys
from typing import AsyncGenerator

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from PIL import Image

from image_resize.main import app as fastapi_app
from image_resize.resize.dependencies import get_uploader_factory
from image_resize.upload.config import UploadSettings, get_upload_settings


class FakeUploader:
    """Stands in for BlobUploader; records what would have been stored."""

    def __init__(self, settings: UploadSettings):
        self.settings = settings
        self.containers = []
        self.uploads = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True

    async def ensure_container(self, name: str) -> None:
        self.containers.append(name)

    async def upload(self, container: str, blob_name: str, content: bytes) -> str:
        self.uploads.append((container, blob_name, content))
        return f"https://fakeaccount.blob.core.windows.net/{container}/{blob_name}"


def make_image_bytes(width: int, height: int, fmt: str = "JPEG", mode: str = "RGB") -> bytes:
    color = (200, 120, 40, 255)[:len(mode)] if mode != "L" else 128
    image = Image.new(mode, (width, height), color)
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def build_multipart(boundary: str, image: bytes, content_type: str = "image/jpeg", fields=None) -> bytes:
    parts = []
    for name, value in (fields or {}).items():
        parts.append(
            f'--{boundary}\r\nContent-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n'.encode()
        )
    parts.append(
        f'--{boundary}\r\nContent-Disposition: form-data; name="file"; filename="photo.jpg"\r\n'
        f'Content-Type: {content_type}\r\n\r\n'.encode() + image + b"\r\n"
    )
    parts.append(f"--{boundary}--\r\n".encode())
    return b"".join(parts)


@pytest.fixture
def image_bytes():
    """Factory fixture producing encoded images of a given size."""
    return make_image_bytes


@pytest.fixture
def multipart_body():
    return build_multipart


@pytest.fixture
def upload_settings() -> UploadSettings:
    return UploadSettings(
        _env_file=None,
        APP_BLOB_ACCOUNT="fakeaccount",
        APP_BLOB_KEY=None,
        APP_BLOB_CONNECTION_STRING=None,
        APP_BLOB_CONTAINER="images",
    )


@pytest.fixture
def missing_upload_settings() -> UploadSettings:
    return UploadSettings(
        _env_file=None,
        APP_BLOB_ACCOUNT="",
        APP_BLOB_KEY=None,
        APP_BLOB_CONNECTION_STRING=None,
    )


@pytest.fixture
def uploader_factory():
    """Uploader factory that keeps every FakeUploader it hands out."""
    created = []

    def _factory(settings: UploadSettings) -> FakeUploader:
        uploader = FakeUploader(settings)
        created.append(uploader)
        return uploader

    _factory.created = created
    return _factory


@pytest.fixture
def app(upload_settings, uploader_factory) -> FastAPI:
    """FastAPI app wired to fake storage settings and uploader"""
    fastapi_app.dependency_overrides[get_upload_settings] = lambda: upload_settings
    fastapi_app.dependency_overrides[get_uploader_factory] = lambda: uploader_factory

    yield fastapi_app

    # Clean up
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
