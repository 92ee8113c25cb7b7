"""Tests for application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from biking2.core.config import GALLERY_PICTURES_DIRECTORY, Settings


def test_datastore_paths():
    """Test derived datastore locations."""
    settings = Settings(datastore_base_directory="/var/lib/biking2")

    assert settings.gallery_pictures_directory == Path("/var/lib/biking2") / GALLERY_PICTURES_DIRECTORY
    assert settings.database_url == "sqlite+aiosqlite:////var/lib/biking2/biking2.db"


def test_dailyfratze_token_from_environment(monkeypatch):
    """Test the access token is read from the environment."""
    monkeypatch.setenv("BIKING2_DAILYFRATZE_ACCESS_TOKEN", "secret")

    settings = Settings()

    assert settings.dailyfratze_access_token == "secret"
    assert settings.dailyfratze_enabled is True


def test_blank_dailyfratze_token_disables_integration(monkeypatch):
    """Test a blank access token counts as missing."""
    monkeypatch.setenv("BIKING2_DAILYFRATZE_ACCESS_TOKEN", "   ")

    settings = Settings()

    assert settings.dailyfratze_access_token is None
    assert settings.dailyfratze_enabled is False


def test_settings_are_immutable():
    """Test settings cannot be changed after startup."""
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.dailyfratze_access_token = "secret"
