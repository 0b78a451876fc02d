"""Configuration settings for GroceryStore."""
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Get project root directory (3 levels up from this package)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default locations
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "grocerystore.log"
DEFAULT_JSON_STORAGE = PROJECT_ROOT / "data" / "local_storage.json"

STORAGE_BACKENDS = ("memory", "json", "sqlite")


class GroceryStoreSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Storage
    STORAGE_BACKEND: str = "sqlite"
    STORAGE_KEY: str = "groceryInventory"
    DB_URL: str = "sqlite:///grocerystore.db"
    DB_ECHO: bool = False
    JSON_STORAGE_PATH: Path = DEFAULT_JSON_STORAGE

    # Inventory rules
    ALLOW_DUPLICATE_IDS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    model_config = SettingsConfigDict(
        env_prefix="GROCERY_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Relative sqlite paths are resolved from the project root
        if self.DB_URL.startswith("sqlite:///") and self.DB_URL != "sqlite:///:memory:":
            relative_path = self.DB_URL.replace("sqlite:///", "")
            if not Path(relative_path).is_absolute():
                self.DB_URL = f"sqlite:///{PROJECT_ROOT / relative_path}"

        if not self.JSON_STORAGE_PATH.is_absolute():
            self.JSON_STORAGE_PATH = PROJECT_ROOT / self.JSON_STORAGE_PATH

        # Ensure log file path is absolute and parent directory exists
        if self.LOG_FILE:
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in STORAGE_BACKENDS:
            raise ValueError(f"Storage backend must be one of: {', '.join(STORAGE_BACKENDS)}")
        return v

    @field_validator("STORAGE_KEY")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Storage key cannot be empty")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class StreamlitSettings(BaseSettings):
    """Streamlit-specific settings."""
    PAGE_TITLE: str = "GroceryStore"
    PAGE_ICON: str = "🛒"
    LAYOUT: str = "centered"

    model_config = SettingsConfigDict(
        env_prefix="STREAMLIT_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("LAYOUT")
    @classmethod
    def validate_layout(cls, v: str) -> str:
        valid_layouts = ["centered", "wide"]
        if v not in valid_layouts:
            raise ValueError(f"Layout must be one of: {', '.join(valid_layouts)}")
        return v


@lru_cache()
def get_settings() -> GroceryStoreSettings:
    """Get cached settings instance."""
    return GroceryStoreSettings()


@lru_cache()
def get_streamlit_settings() -> StreamlitSettings:
    """Get cached Streamlit settings instance."""
    return StreamlitSettings()


def clear_settings_cache() -> None:
    """Clear all settings caches to force reload from environment."""
    get_settings.cache_clear()
    get_streamlit_settings.cache_clear()
