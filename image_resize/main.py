# image_resize/main.py
import logging

from fastapi import FastAPI

from image_resize.api import api_router
from image_resize.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title=settings.PROJECT_NAME)

app.include_router(api_router)


@app.get("/")
async def read_root():
    return {"msg": f"Welcome to {settings.PROJECT_NAME}!"}


@app.get("/health-check")
async def health_check():
    return {"status": "healthy"}
