"""Database models."""

from biking2.models.gallery_picture import GalleryPicture

__all__ = [
    "GalleryPicture",
]
