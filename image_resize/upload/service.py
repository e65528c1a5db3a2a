# image_resize/upload/service.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.identity.aio import DefaultAzureCredential
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient

from image_resize.exception import UploadError

from .config import UploadSettings

logger = logging.getLogger(__name__)


def generate_blob_name(now: Optional[datetime] = None) -> str:
    """One folder per UTC day, one uuid4 per object."""
    now = now or datetime.now(timezone.utc)
    return f"{now:%Y-%m-%d}/{uuid.uuid4()}.jpg"


class BlobUploader:
    """Thin async wrapper over the parts of Blob Storage the resize flow uses."""

    def __init__(
        self,
        blob_service_client: BlobServiceClient,
        credential=None,
        cache_control: Optional[str] = None,
    ):
        self.blob_service_client = blob_service_client
        self._credential = credential
        self._cache_control = cache_control

    @classmethod
    def from_settings(cls, settings: UploadSettings) -> "BlobUploader":
        if settings.APP_BLOB_CONNECTION_STRING:
            client = BlobServiceClient.from_connection_string(settings.APP_BLOB_CONNECTION_STRING)
            return cls(client, cache_control=settings.IMAGE_CACHE_CONTROL)

        if settings.APP_BLOB_KEY:
            client = BlobServiceClient(
                account_url=settings.account_url,
                credential=settings.APP_BLOB_KEY,
            )
            return cls(client, cache_control=settings.IMAGE_CACHE_CONTROL)

        # Managed identity when deployed, developer logins (CLI, IDE) locally.
        credential = DefaultAzureCredential()
        client = BlobServiceClient(account_url=settings.account_url, credential=credential)
        return cls(client, credential=credential, cache_control=settings.IMAGE_CACHE_CONTROL)

    async def __aenter__(self) -> "BlobUploader":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.blob_service_client.close()
        if self._credential is not None:
            await self._credential.close()

    async def ensure_container(self, name: str) -> None:
        container_client = self.blob_service_client.get_container_client(name)
        try:
            await container_client.create_container()
            logger.info("Created blob container '%s'", name)
        except ResourceExistsError:
            pass
        except AzureError as e:
            raise UploadError(f"Upload failed: {str(e)}") from e

    async def upload(self, container: str, blob_name: str, content: bytes) -> str:
        try:
            blob_client = self.blob_service_client.get_blob_client(
                container=container,
                blob=blob_name
            )

            await blob_client.upload_blob(
                content,
                overwrite=True,
                content_settings=ContentSettings(
                    content_type="image/jpeg",
                    cache_control=self._cache_control
                )
            )
        except AzureError as e:
            raise UploadError(f"Upload failed: {str(e)}") from e

        logger.info("Uploaded %d bytes to %s/%s", len(content), container, blob_name)
        return blob_client.url
