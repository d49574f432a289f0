from __future__ import annotations

import configparser
from pathlib import Path
from typing import Optional

from loguru import logger
from platformdirs import user_config_dir

from docpad.domain.interfaces import IConfigService


class IniConfigService(IConfigService):
    r"""
    Reads DocPad's config.ini from the first readable candidate:

      1. an explicit path (``--config`` style override)
      2. the per-user config dir, e.g. ~/.config/DocPad/config.ini or %APPDATA%\DocPad\config.ini
      3. <project_root>/config/config.ini shipped with the app

    Missing sections and keys fall back to the caller's default.
    """

    APP_DIR = "DocPad"
    FILE_NAME = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Optional[Path] = None

        for path in self.candidate_paths(explicit_path, project_root):
            parser = self._read(path)
            if parser is not None:
                self._parser = parser
                self._loaded_from = path
                logger.debug("Loaded config from {}", path)
                break

    @classmethod
    def candidate_paths(
        cls, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None
    ) -> list[Path]:
        paths = [explicit_path] if explicit_path else []
        paths.append(Path(user_config_dir(cls.APP_DIR)) / cls.FILE_NAME)
        if project_root:
            paths.append(project_root / "config" / cls.FILE_NAME)
        return paths

    @staticmethod
    def _read(path: Path) -> Optional[configparser.ConfigParser]:
        if not path.is_file():
            return None
        parser = configparser.ConfigParser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            # skip to the next candidate; the editor still starts with defaults
            logger.warning("Ignoring unreadable config {}: {}", path, e)
            return None
        return parser

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._parser.get(section, key, raw=True, fallback=default)

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        try:
            return self._parser.getint(section, key, raw=True, fallback=default)
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        raw = self.get(section, key)
        if raw is None:
            return default
        return self._parser.BOOLEAN_STATES.get(raw.strip().lower(), default)

    def app_version(self) -> str:
        return (self.get("app", "version") or "").strip() or "0.0.0"

    @property
    def loaded_from(self) -> Optional[Path]:
        """Which candidate was read, or None when running on defaults."""
        return self._loaded_from
