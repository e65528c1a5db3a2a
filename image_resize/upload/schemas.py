# image_resize/upload/schemas.py
from pydantic import BaseModel


class UploadResult(BaseModel):
    url: str
    blob_name: str
    size: int
