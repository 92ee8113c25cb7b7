"""Service layer for business logic."""

from biking2.services.dailyfratze import DailyFratzeProvider, build_daily_fratze_provider
from biking2.services.gallery_picture_repository import (
    GalleryPictureRepository,
    PersistOutcome,
    PersistResult,
)
from biking2.services.gallery_service import GalleryService, UploadOutcome, UploadResult

__all__ = [
    "DailyFratzeProvider",
    "GalleryPictureRepository",
    "GalleryService",
    "PersistOutcome",
    "PersistResult",
    "UploadOutcome",
    "UploadResult",
    "build_daily_fratze_provider",
]
