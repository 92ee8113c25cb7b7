"""Gallery service for picture upload and retrieval."""

import os
import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path

from loguru import logger

from biking2.models.gallery_picture import GalleryPicture
from biking2.schemas.gallery_picture import GalleryPictureCreate, GalleryPictureDTO
from biking2.services.gallery_picture_repository import (
    GalleryPictureRepository,
    PersistOutcome,
)


class UploadOutcome(str, Enum):
    """Outcome of a picture upload."""

    CREATED = "created"
    INVALID = "invalid"
    INTEGRITY_VIOLATION = "integrity_violation"
    IO_FAILURE = "io_failure"


@dataclass(frozen=True)
class UploadResult:
    """Result of a picture upload."""

    outcome: UploadOutcome
    picture: GalleryPictureDTO | None = None
    message: str | None = None


@dataclass(frozen=True)
class StoredPictureFile:
    """A picture file on disk."""

    path: Path
    stat_result: os.stat_result

    @property
    def size(self) -> int:
        return self.stat_result.st_size


class GalleryService:
    """
    Stores picture metadata through the repository and picture bytes on disk.

    Metadata is written first. A failing file write leaves the metadata
    record in place; nothing is rolled back.
    """

    def __init__(
        self,
        repository: GalleryPictureRepository,
        gallery_pictures_directory: Path,
    ):
        self.repository = repository
        self.gallery_pictures_directory = Path(gallery_pictures_directory)

    async def create_gallery_picture(
        self, data: GalleryPictureCreate, image_data: bytes | None
    ) -> UploadResult:
        """Persist metadata for a new picture and write its bytes to disk."""
        if not image_data:
            return UploadResult(UploadOutcome.INVALID, message="Image data is required")

        result = await self.repository.save(
            GalleryPicture(
                taken_on=data.taken_on,
                filename=f"{uuid.uuid4()}.jpg",
                description=data.description,
            )
        )
        if result.outcome is PersistOutcome.INTEGRITY_VIOLATION:
            return UploadResult(UploadOutcome.INTEGRITY_VIOLATION, message=result.error)

        picture = result.entity
        target = self.gallery_pictures_directory / picture.filename
        try:
            with open(target, "wb") as f:
                f.write(image_data)
        except OSError as e:
            logger.error(f"Could not store gallery picture {picture.id} at {target}: {e}")
            return UploadResult(
                UploadOutcome.IO_FAILURE,
                message="Could not store gallery picture",
            )

        logger.info(f"Stored gallery picture {picture.id} ({len(image_data)} bytes)")
        return UploadResult(
            UploadOutcome.CREATED,
            picture=GalleryPictureDTO.model_validate(picture),
        )

    async def get_gallery_picture(self, picture_id: int) -> StoredPictureFile | None:
        """Resolve the file of a picture, None if the picture or its file is unknown."""
        picture = await self.repository.find_by_id(picture_id)
        if not picture:
            return None

        path = (self.gallery_pictures_directory / picture.filename).absolute()
        if not path.is_file():
            logger.warning(f"File of gallery picture {picture_id} is missing: {path}")
            return None
        return StoredPictureFile(path=path, stat_result=path.stat())

    async def get_gallery_pictures(self) -> list[GalleryPictureDTO]:
        """Get all pictures ordered by the day they were taken."""
        pictures = await self.repository.find_all()
        return [GalleryPictureDTO.model_validate(p) for p in pictures]

    async def get_gallery_pictures_taken_on(
        self, taken_on: date
    ) -> list[GalleryPictureDTO]:
        """Get all pictures taken on a given day."""
        pictures = await self.repository.find_all_by_taken_on_between(taken_on, taken_on)
        return [GalleryPictureDTO.model_validate(p) for p in pictures]
