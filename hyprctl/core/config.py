"""Application configuration using pydantic-settings."""
from pathlib import Path

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_XMLNS = "https://github.com/Teajey/hyprctl"
DEFAULT_DOCS_URL = "https://github.com/Teajey/hyprctl/blob/main/README.md"


class NamespaceConfig(BaseModel):
    """XML namespace placed on the outermost element of every document."""

    xmlns: str = DEFAULT_XMLNS
    docs_url: str = DEFAULT_DOCS_URL

    @property
    def comment(self) -> str:
        return f" See an overview of what this XML means at {self.docs_url} "


class Settings(BaseSettings):
    """Application settings loaded from YAML or environment."""

    model_config = SettingsConfigDict(env_prefix="HYPRCTL_", env_nested_delimiter="__")

    namespace: NamespaceConfig = NamespaceConfig()
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Settings instance with loaded configuration.
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))
