"""API router initialization."""

from fastapi import APIRouter

from biking2.api.biking_pictures import router as biking_pictures_router
from biking2.api.gallery_pictures import router as gallery_pictures_router

router = APIRouter(prefix="/api")

router.include_router(gallery_pictures_router, prefix="/galleryPictures", tags=["Gallery"])
router.include_router(biking_pictures_router, prefix="/bikingPictures", tags=["Biking pictures"])
