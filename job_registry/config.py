"""Configuration management."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings


class RegistryConfig(BaseModel):
    """Registry options read from the YAML config file."""

    admin_identity: Optional[str] = None
    log_level: str = "INFO"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Identity
    admin_identity: Optional[str] = None

    # Paths
    db_path: str = "data/registry.db"
    config_path: str = "config.yaml"

    log_level: Optional[str] = None

    class Config:
        env_prefix = "JOB_REGISTRY_"
        env_file = ".env"
        env_file_encoding = "utf-8"


def load_config(config_path: str = "config.yaml") -> dict:
    """Load configuration from YAML file."""
    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            return yaml.safe_load(f) or {}
    return {}


def resolve_config(settings: Settings, config_path: Optional[str] = None) -> RegistryConfig:
    """Merge the YAML config file with environment settings.

    Environment values win over values from the file.

    Args:
        settings: Settings loaded from the environment
        config_path: YAML file to read (defaults to ``settings.config_path``)

    Returns:
        Validated registry configuration
    """
    config = RegistryConfig(**load_config(config_path or settings.config_path))
    overrides = {}
    if settings.admin_identity:
        overrides["admin_identity"] = settings.admin_identity
    if settings.log_level:
        overrides["log_level"] = settings.log_level
    return config.model_copy(update=overrides)


# Global settings instance
settings = Settings()
