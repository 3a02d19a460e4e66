"""Configuration settings for the flashcards service."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data locations from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
CARDS_PATH = Path(os.getenv("CARDS_PATH", str(DATA_DIR / "cards.json")))
PROGRESS_PATH = Path(os.getenv("PROGRESS_PATH", str(DATA_DIR / "progress.json")))

# Catalog settings
LANGUAGES = ["Indonesia", "English", "Japanese", "Korean"]
CATEGORIES = [
    {"id": "vocabulary", "label": "📖 Kata"},
    {"id": "sentences", "label": "💬 Kalimat"},
    {"id": "conversation", "label": "🗣 Percakapan"},
    {"id": "grammar", "label": "🧠 Grammar dasar"},
]
ALL_CATEGORIES = "all"
PROGRESS_BACKENDS = ("json", "sql")


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    directories = [
        DATA_DIR,
        CARDS_PATH.parent,
        PROGRESS_PATH.parent,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)


@dataclass
class PathSettings:
    """Path configuration settings."""
    base_dir: Path = BASE_DIR
    data_dir: Path = DATA_DIR
    cards_path: Path = CARDS_PATH
    progress_path: Path = PROGRESS_PATH


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = os.getenv("DATABASE_URL", "sqlite:///dailycards.db")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"


@dataclass
class StorageSettings:
    """Progress storage settings."""
    progress_backend: str = os.getenv("PROGRESS_BACKEND", "json").lower()


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class ServerSettings:
    """HTTP server settings."""
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4173"))


@dataclass
class CatalogSettings:
    """Languages, categories and request defaults."""
    languages: list[str] = field(default_factory=lambda: list(LANGUAGES))
    categories: list[dict[str, str]] = field(default_factory=lambda: [dict(c) for c in CATEGORIES])
    default_native: str = "Indonesia"
    default_target: str = "English"
    target_fallback: str = "English"
    native_fallback: str = "Indonesia"
    default_category: str = ALL_CATEGORIES
    default_profile_id: str = "guest"

    @property
    def category_ids(self) -> list[str]:
        return [category["id"] for category in self.categories]


@dataclass
class MonitoringSettings:
    """Prometheus metrics settings."""
    enabled: bool = os.getenv("METRICS_ENABLED", "false").lower() == "true"
    port: int = int(os.getenv("METRICS_PORT", "9090"))


def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_storage_settings() -> StorageSettings:
    """Get storage settings."""
    return StorageSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_server_settings() -> ServerSettings:
    """Get server settings."""
    return ServerSettings()


def get_catalog_settings() -> CatalogSettings:
    """Get catalog settings."""
    return CatalogSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    paths: PathSettings = field(default_factory=get_path_settings)
    database: DatabaseSettings = field(default_factory=get_database_settings)
    storage: StorageSettings = field(default_factory=get_storage_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    server: ServerSettings = field(default_factory=get_server_settings)
    catalog: CatalogSettings = field(default_factory=get_catalog_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if self.storage.progress_backend not in PROGRESS_BACKENDS:
            raise ValueError(
                f"PROGRESS_BACKEND must be one of {', '.join(PROGRESS_BACKENDS)}, "
                f"got {self.storage.progress_backend!r}"
            )

        languages = self.catalog.languages
        for name in ("default_native", "default_target", "target_fallback", "native_fallback"):
            if getattr(self.catalog, name) not in languages:
                raise ValueError(f"{name} must be one of the configured languages")

        if self.server.port < 1:
            raise ValueError("PORT must be positive")

        if self.monitoring.port < 1:
            raise ValueError("METRICS_PORT must be positive")


# Create global settings instance
settings = Settings()
settings.validate()
