"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_FILE_FILTER,
    MAX_RECENTS,
    SAVE_CHANGES_TEXT,
    SAVE_CHANGES_TITLE,
    SETTINGS_GEOMETRY,
    SETTINGS_RECENTS,
    UNTITLED,
)
from .logging import configure_logging

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "UNTITLED",
    "DEFAULT_FILE_FILTER",
    "SETTINGS_GEOMETRY",
    "SETTINGS_RECENTS",
    "MAX_RECENTS",
    "SAVE_CHANGES_TITLE",
    "SAVE_CHANGES_TEXT",
    "configure_logging",
]
