# image_resize/resize/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from image_resize.exception import ImageResizeError
from image_resize.upload.config import UploadSettings, get_upload_settings

from .constants import CORS_HEADERS
from .dependencies import UploaderFactory, get_uploader_factory
from .schemas import ErrorResponse, ResizeSuccessResponse
from .service import build_raw_request, resize_and_upload

router = APIRouter()
logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=CORS_HEADERS,
    )


@router.options("/ResizeAndUploadImage", status_code=status.HTTP_204_NO_CONTENT)
async def preflight() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)


@router.post("/ResizeAndUploadImage")
async def resize_and_upload_image(
    request: Request,
    width: Optional[str] = Query(None),
    quality: Optional[str] = Query(None),
    upload_settings: UploadSettings = Depends(get_upload_settings),
    uploader_factory: UploaderFactory = Depends(get_uploader_factory),
):
    logger.info("Image resize and upload function triggered.")

    try:
        raw_request = build_raw_request(
            request.headers.get("content-type"),
            await request.body(),
            width=width,
            quality=quality,
        )
        result = await resize_and_upload(raw_request, upload_settings, uploader_factory)
    except ImageResizeError as e:
        if e.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Error processing image: %s", e.message)
        else:
            logger.warning("Rejected request: %s", e.message)
        return _error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("Error processing image: %s", e)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    body = ResizeSuccessResponse(url=result.url, blob_name=result.blob_name, size=result.size)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(by_alias=True),
        headers=CORS_HEADERS,
    )
