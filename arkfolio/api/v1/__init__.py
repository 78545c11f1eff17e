"""API v1 routers"""

from fastapi import APIRouter
from .carousel import router as carousel_router
from .themes import router as themes_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(themes_router)
v1_router.include_router(carousel_router)
