"""Tests for configuration settings."""
import pytest

from dailycards.config import (
    CatalogSettings,
    Settings,
    StorageSettings,
    settings,
)


def test_settings_defaults():
    """Test default settings values."""
    assert settings.catalog.languages == ["Indonesia", "English", "Japanese", "Korean"]
    assert settings.catalog.category_ids == ["vocabulary", "sentences", "conversation", "grammar"]
    assert settings.catalog.default_native == "Indonesia"
    assert settings.catalog.default_target == "English"
    assert settings.catalog.default_category == "all"
    assert settings.catalog.default_profile_id == "guest"
    assert settings.storage.progress_backend == "json"
    assert settings.paths.cards_path.name == "cards.json"
    assert settings.paths.progress_path.name == "progress.json"


def test_unknown_backend_rejected():
    """Test that an unsupported progress backend fails validation."""
    test_settings = Settings(storage=StorageSettings(progress_backend="redis"))
    with pytest.raises(ValueError, match="PROGRESS_BACKEND"):
        test_settings.validate()


def test_fallback_language_must_be_configured():
    """Test that fallbacks must be among the languages."""
    test_settings = Settings(catalog=CatalogSettings(target_fallback="Klingon"))
    with pytest.raises(ValueError, match="target_fallback"):
        test_settings.validate()


def test_valid_settings_pass():
    """Test that default settings validate."""
    Settings().validate()


if __name__ == "__main__":
    pytest.main([__file__])
