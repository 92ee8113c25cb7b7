"""Gallery picture model for uploaded picture metadata."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from biking2.db.base import Base


class GalleryPicture(Base):
    """Gallery picture database model."""

    __tablename__ = "gallery_pictures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    taken_on: Mapped[date] = mapped_column(Date, index=True)
    filename: Mapped[str] = mapped_column(String(255), unique=True)
    description: Mapped[str] = mapped_column(String(2048))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now()
    )
