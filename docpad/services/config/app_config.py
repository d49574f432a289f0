from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

from docpad.domain.interfaces import IAppConfig
from docpad.services.config.ini_config_service import IniConfigService
from docpad.utils.constants import DEFAULT_FILE_FILTER, MAX_RECENTS

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Project root for the bundled config/ and version files:
      - PyInstaller bundles expose sys._MEIPASS
      - otherwise walk up from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # docpad/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None
    return m.group(1)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService and resolves the DocPad settings with their defaults.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini [app] version
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    # ---- DocPad settings ----

    def wrap_enabled(self) -> bool:
        wrap = self.ini.get_bool("editor", "wrap", True)
        return True if wrap is None else wrap

    def file_filter(self) -> str:
        return (self.ini.get("files", "filter", None) or "").strip() or DEFAULT_FILE_FILTER

    def max_recents(self) -> int:
        n = self.ini.get_int("files", "max_recents", MAX_RECENTS)
        if n is None or n < 0:
            return MAX_RECENTS
        return n

    def log_level(self) -> str:
        return (self.ini.get("logging", "level", None) or "INFO").strip().upper() or "INFO"

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
