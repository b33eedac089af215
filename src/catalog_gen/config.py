"""Configuration for catalog-gen."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging level for diagnostics on stderr."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class CatalogGenConfig(BaseSettings):
    """Configuration for a catalog generation run.

    The generator takes no command-line arguments. The defaults point at
    ``catalogs/*.yaml`` and ``CATALOG.md`` in the working directory; build
    environments may override them with ``CATALOG_GEN_`` variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_GEN_",
        case_sensitive=False,
        extra="ignore",
    )

    catalogs_dir: Path = Field(
        default=Path("catalogs"),
        description="Directory holding the catalog YAML documents",
    )
    catalog_pattern: str = Field(
        default="*.yaml",
        description="Glob pattern selecting catalog documents",
    )
    output_file: Path = Field(
        default=Path("CATALOG.md"),
        description="Path of the generated Markdown document",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )
