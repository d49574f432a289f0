"""Concrete service implementations."""

from .file_service import FileService
from .settings_service import SettingsService

__all__ = ["FileService", "SettingsService"]
