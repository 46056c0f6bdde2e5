"""Configuration module for the line graph viewer."""

from .settings import Settings, GraphConfig, DisplaySettings
from .colors import Colors

__all__ = ["Settings", "GraphConfig", "DisplaySettings", "Colors"]
