"""FastAPI dependencies for dependency injection."""

from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from biking2.core.config import get_settings
from biking2.db.session import async_session_maker
from biking2.services.dailyfratze import DailyFratzeProvider
from biking2.services.gallery_picture_repository import GalleryPictureRepository
from biking2.services.gallery_service import GalleryService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


DBSession = Annotated[AsyncSession, Depends(get_db)]


def get_gallery_pictures_directory() -> Path:
    """Directory the gallery pictures are stored in."""
    return get_settings().gallery_pictures_directory


def get_gallery_picture_repository(db: DBSession) -> GalleryPictureRepository:
    """Get the gallery picture repository bound to the request session."""
    return GalleryPictureRepository(db)


def get_gallery_service(
    repository: Annotated[GalleryPictureRepository, Depends(get_gallery_picture_repository)],
    directory: Annotated[Path, Depends(get_gallery_pictures_directory)],
) -> GalleryService:
    """Get the gallery service."""
    return GalleryService(repository, directory)


def get_daily_fratze_provider(request: Request) -> DailyFratzeProvider | None:
    """Get the DailyFratze provider, None if the integration is disabled."""
    return getattr(request.app.state, "daily_fratze_provider", None)


def get_daily_fratze_provider_required(
    provider: Annotated[DailyFratzeProvider | None, Depends(get_daily_fratze_provider)],
) -> DailyFratzeProvider:
    """Require the DailyFratze provider, raise 503 if it is not configured."""
    if provider is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="DailyFratze integration is not configured",
        )
    return provider


# Type aliases for cleaner dependency injection
GalleryServiceDep = Annotated[GalleryService, Depends(get_gallery_service)]
DailyFratze = Annotated[DailyFratzeProvider, Depends(get_daily_fratze_provider_required)]
