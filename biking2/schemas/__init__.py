"""Pydantic schemas for API request/response validation."""

from biking2.schemas.gallery_picture import GalleryPictureCreate, GalleryPictureDTO
from biking2.schemas.rss import Content

__all__ = [
    "Content",
    "GalleryPictureCreate",
    "GalleryPictureDTO",
]
