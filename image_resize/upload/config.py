# image_resize/upload/config.py
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    # Either an account name (key or ambient Azure credentials) or a full
    # connection string identifies the storage account.
    APP_BLOB_ACCOUNT: str = ""
    APP_BLOB_KEY: Optional[str] = None
    APP_BLOB_CONNECTION_STRING: Optional[str] = None

    APP_BLOB_CONTAINER: str = "images"
    IMAGE_CACHE_CONTROL: str = "public, max-age=31536000, immutable"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_configured(self) -> bool:
        return bool(self.APP_BLOB_ACCOUNT.strip() or self.APP_BLOB_CONNECTION_STRING)

    @property
    def account_url(self) -> str:
        return f"https://{self.APP_BLOB_ACCOUNT.strip()}.blob.core.windows.net"


@lru_cache()
def get_upload_settings() -> UploadSettings:
    """Storage settings, read once per process."""
    return UploadSettings()
