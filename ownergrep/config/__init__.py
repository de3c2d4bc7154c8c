# ownergrep/config/__init__.py
"""Configuration module for ownergrep."""

from ownergrep.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
