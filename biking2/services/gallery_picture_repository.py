"""Repository for gallery picture metadata."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from biking2.models.gallery_picture import GalleryPicture
from biking2.services.base_service import BaseService


class PersistOutcome(str, Enum):
    """Outcome of persisting a gallery picture."""

    SAVED = "saved"
    INTEGRITY_VIOLATION = "integrity_violation"


@dataclass(frozen=True)
class PersistResult:
    """Result of a save: the stored entity or the reason it was rejected."""

    outcome: PersistOutcome
    entity: GalleryPicture | None = None
    error: str | None = None


class GalleryPictureRepository(BaseService[GalleryPicture]):
    """Persists and queries gallery picture metadata."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, GalleryPicture)

    async def save(self, picture: GalleryPicture) -> PersistResult:
        """Persist a new picture, reporting constraint conflicts instead of raising."""
        filename = picture.filename
        try:
            saved = await self.create(picture)
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Rejected gallery picture {filename!r}: {e.orig}")
            return PersistResult(PersistOutcome.INTEGRITY_VIOLATION, error=str(e.orig))
        return PersistResult(PersistOutcome.SAVED, entity=saved)

    async def find_by_id(self, picture_id: int) -> GalleryPicture | None:
        """Get a picture by id."""
        return await self.get_by_id(picture_id)

    async def find_all(self) -> list[GalleryPicture]:
        """Get all pictures ordered by the day they were taken."""
        return await self.get_all(GalleryPicture.taken_on, GalleryPicture.id)

    async def find_all_by_taken_on_between(
        self, start: date, end: date
    ) -> list[GalleryPicture]:
        """Get all pictures taken within [start, end]."""
        result = await self.db.execute(
            select(GalleryPicture)
            .where(GalleryPicture.taken_on.between(start, end))
            .order_by(GalleryPicture.taken_on, GalleryPicture.id)
        )
        return list(result.scalars().all())
