"""Pytest configuration and fixtures."""

import time
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from biking2.core.config import GALLERY_PICTURES_DIRECTORY
from biking2.core.deps import get_db, get_gallery_pictures_directory
from biking2.db.base import Base
from biking2.db import models_registry  # noqa: F401 - Import to register models
from biking2.main import app
from biking2.models.gallery_picture import GalleryPicture

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Smallest valid JPEG header plus some payload
JPEG_BYTES = bytes.fromhex("ffd8ffe000104a46494600010100000100010000") + bytes(range(256)) * 8


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
def gallery_dir(tmp_path: Path) -> Path:
    """Create the gallery pictures directory below a temporary datastore."""
    directory = tmp_path / GALLERY_PICTURES_DIRECTORY
    directory.mkdir()
    return directory


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession, gallery_dir: Path
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with overridden dependencies."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_gallery_pictures_directory] = lambda: gallery_dir

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def berlin_time(monkeypatch):
    """Run with Europe/Berlin as local time zone."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available")
    monkeypatch.setenv("TZ", "Europe/Berlin")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """Picture payload."""
    return JPEG_BYTES


@pytest_asyncio.fixture(scope="function")
async def stored_picture(
    db_session: AsyncSession, gallery_dir: Path
) -> tuple[GalleryPicture, Path]:
    """Create a gallery picture with its file on disk."""
    image_path = gallery_dir / "45325.jpg"
    image_path.write_bytes(JPEG_BYTES)

    picture = GalleryPicture(
        taken_on=date.today(),
        filename=image_path.name,
        description="Sunset at the Rhine",
    )
    db_session.add(picture)
    await db_session.commit()
    await db_session.refresh(picture)
    return picture, image_path


@pytest_asyncio.fixture(scope="function")
async def sample_pictures(db_session: AsyncSession) -> list[GalleryPicture]:
    """Create sample gallery pictures (metadata only)."""
    pictures = [
        GalleryPicture(
            taken_on=date(2018, 12, 24),
            filename="christmas-eve.jpg",
            description="Christmas eve ride",
        ),
        GalleryPicture(
            taken_on=date(2014, 2, 24),
            filename="first-ride.jpg",
            description="First ride of the year",
        ),
        GalleryPicture(
            taken_on=date(2018, 12, 24),
            filename="christmas-eve-2.jpg",
            description="Christmas eve, later",
        ),
        GalleryPicture(
            taken_on=date(2018, 12, 25),
            filename="christmas.jpg",
            description="Christmas day",
        ),
    ]

    for picture in pictures:
        db_session.add(picture)
    await db_session.commit()

    return pictures
