"""Tests for GroceryStore settings."""
import pytest
from pydantic import ValidationError

from grocerystore.config.settings import (
    PROJECT_ROOT,
    GroceryStoreSettings,
    StreamlitSettings,
    clear_settings_cache,
    get_settings,
)


def test_defaults():
    """Test default settings values."""
    settings = GroceryStoreSettings(_env_file=None)
    assert settings.STORAGE_BACKEND == "sqlite"
    assert settings.STORAGE_KEY == "groceryInventory"
    assert settings.ALLOW_DUPLICATE_IDS is True
    assert settings.DB_URL == f"sqlite:///{PROJECT_ROOT / 'grocerystore.db'}"
    assert settings.JSON_STORAGE_PATH.is_absolute()


def test_env_override(monkeypatch):
    """Test that environment variables with the prefix are read."""
    monkeypatch.setenv("GROCERY_STORAGE_BACKEND", "JSON")
    monkeypatch.setenv("GROCERY_ALLOW_DUPLICATE_IDS", "false")
    settings = GroceryStoreSettings(_env_file=None)
    assert settings.STORAGE_BACKEND == "json"
    assert settings.ALLOW_DUPLICATE_IDS is False


def test_relative_paths_resolved():
    """Test that relative paths are resolved from the project root."""
    settings = GroceryStoreSettings(
        _env_file=None,
        DB_URL="sqlite:///data/test.db",
        JSON_STORAGE_PATH="data/store.json"
    )
    assert settings.DB_URL == f"sqlite:///{PROJECT_ROOT / 'data' / 'test.db'}"
    assert settings.JSON_STORAGE_PATH == PROJECT_ROOT / "data" / "store.json"


def test_memory_db_url_untouched():
    """Test that the in-memory URL is kept as is."""
    settings = GroceryStoreSettings(_env_file=None, DB_URL="sqlite:///:memory:")
    assert settings.DB_URL == "sqlite:///:memory:"


@pytest.mark.parametrize("field, value", [
    ("STORAGE_BACKEND", "redis"),
    ("STORAGE_KEY", "  "),
    ("LOG_LEVEL", "LOUD"),
    ("LOG_FORMAT", "fancy"),
])
def test_invalid_values(field, value):
    """Test that invalid values are rejected."""
    with pytest.raises(ValidationError):
        GroceryStoreSettings(_env_file=None, **{field: value})


def test_log_level_normalized():
    """Test that the log level is upper-cased."""
    assert GroceryStoreSettings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_streamlit_layout():
    """Test Streamlit layout validation."""
    assert StreamlitSettings(_env_file=None).LAYOUT == "centered"
    with pytest.raises(ValidationError):
        StreamlitSettings(_env_file=None, LAYOUT="tall")


def test_settings_cache(monkeypatch):
    """Test that settings are cached until the cache is cleared."""
    clear_settings_cache()
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("GROCERY_STORAGE_KEY", "otherKey")
    assert get_settings().STORAGE_KEY == first.STORAGE_KEY

    clear_settings_cache()
    assert get_settings().STORAGE_KEY == "otherKey"
    monkeypatch.delenv("GROCERY_STORAGE_KEY")
    clear_settings_cache()
