"""
Public carousel endpoint for the homepage.
"""

from typing import List

from fastapi import APIRouter, Depends

from arkfolio.api.dependencies import get_carousel_service
from arkfolio.api.schemas.carousel import CarouselSlideDto
from arkfolio.application.services.carousel_service import CarouselService
from arkfolio.infra.config.logging_config import get_logger

router = APIRouter(prefix="/carousel", tags=["carousel"])
log = get_logger("api.carousel")


@router.get("", response_model=List[CarouselSlideDto])
async def get_carousel(
    service: CarouselService = Depends(get_carousel_service),
) -> List[CarouselSlideDto]:
    """
    Active carousel items mapped to public slides.

    Missing link text defaults to "Learn More"; a missing link points to the
    linked project, else the project index.
    """
    slides = await service.get_public_slides()
    log.info("carousel.list.success", count=len(slides))
    return slides
