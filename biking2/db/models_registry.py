"""
Model registry.

Import all models here to ensure they are registered with SQLAlchemy metadata
before ``Base.metadata.create_all`` runs.
"""

from biking2.db.base import Base
from biking2.models.gallery_picture import GalleryPicture

__all__ = [
    "Base",
    "GalleryPicture",
]
