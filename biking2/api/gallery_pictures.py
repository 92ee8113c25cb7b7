"""Gallery picture API endpoints."""

from datetime import date

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from pydantic import ValidationError

from biking2.core.deps import GalleryServiceDep
from biking2.core.responses import ZeroCopyFileResponse
from biking2.schemas.gallery_picture import GalleryPictureCreate, GalleryPictureDTO
from biking2.services.gallery_service import UploadOutcome

router = APIRouter()


@router.get("", response_model=list[GalleryPictureDTO])
async def get_gallery_pictures(
    gallery_service: GalleryServiceDep,
) -> list[GalleryPictureDTO]:
    """Get all gallery pictures ordered by the day they were taken."""
    return await gallery_service.get_gallery_pictures()


@router.post("", response_model=GalleryPictureDTO)
async def create_gallery_picture(
    gallery_service: GalleryServiceDep,
    taken_on: str = Form(..., alias="takenOn"),
    description: str = Form(...),
    image_data: UploadFile | None = File(None, alias="imageData"),
) -> GalleryPictureDTO:
    """
    Upload a new gallery picture.

    - **imageData**: Picture file (required, not empty)
    - **takenOn**: ISO date or date-time the picture was taken
    - **description**: Description of the picture
    """
    try:
        data = GalleryPictureCreate(taken_on=taken_on, description=description)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid gallery picture: {e.error_count()} validation error(s)",
        )

    content = await image_data.read() if image_data is not None else None
    result = await gallery_service.create_gallery_picture(data, content)

    if result.outcome is UploadOutcome.INVALID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.message,
        )
    if result.outcome is UploadOutcome.INTEGRITY_VIOLATION:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Gallery picture conflicts with an existing one",
        )
    if result.outcome is UploadOutcome.IO_FAILURE:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.message,
        )

    return result.picture


@router.get("/{picture_id:int}.jpg", response_class=ZeroCopyFileResponse)
async def get_gallery_picture(
    picture_id: int,
    gallery_service: GalleryServiceDep,
) -> ZeroCopyFileResponse:
    """
    Get the picture file.

    Uses zero-copy send when the server supports it, streams otherwise.
    """
    stored = await gallery_service.get_gallery_picture(picture_id)
    if stored is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Gallery picture not found",
        )

    return ZeroCopyFileResponse(
        stored.path,
        media_type="image/jpeg",
        stat_result=stored.stat_result,
    )


@router.get("/{taken_on}", response_model=list[GalleryPictureDTO])
async def get_gallery_pictures_taken_on(
    taken_on: date,
    gallery_service: GalleryServiceDep,
) -> list[GalleryPictureDTO]:
    """
    Get all gallery pictures taken on a day.

    - **taken_on**: ISO date (yyyy-mm-dd)
    """
    return await gallery_service.get_gallery_pictures_taken_on(taken_on)
