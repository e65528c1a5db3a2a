# image_resize/api.py
from fastapi import APIRouter

from image_resize.resize.router import router as resize_router

api_router = APIRouter()
api_router.include_router(resize_router, tags=["resize"])
