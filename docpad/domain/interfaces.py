from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_recent(self) -> list[str]: ...
    def set_recent(self, recent: Iterable[str]) -> None: ...


@runtime_checkable
class IConfigService(Protocol):
    """Read-only view over the INI configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def app_version(self) -> str: ...


@runtime_checkable
class IAppConfig(IConfigService, Protocol):
    """Application-level config: the INI surface plus resolved DocPad settings."""

    def get_version(self) -> str: ...
    def wrap_enabled(self) -> bool: ...
    def file_filter(self) -> str: ...
    def max_recents(self) -> int: ...
    def log_level(self) -> str: ...

    @property
    def loaded_from(self) -> Path | None: ...
