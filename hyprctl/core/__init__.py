"""Core utilities: configuration and logging."""
from .config import Settings, NamespaceConfig
from .logging import setup_logging

__all__ = ["Settings", "NamespaceConfig", "setup_logging"]
