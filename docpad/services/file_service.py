from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from docpad.domain.interfaces import IFileService

ENCODING = "utf-8"


class FileService(IFileService):
    """
    UTF-8 documents on disk. Every failure surfaces as OSError so callers
    have a single error type to handle for "could not open/save this file".
    """

    def read_text(self, path: Path) -> str:
        data = path.read_bytes()
        try:
            return data.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise OSError(f"Not a UTF-8 text file: {path}") from e

    def write_text_atomic(self, path: Path, text: str) -> None:
        # QSaveFile writes to a temp file and renames on commit
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}: {sf.errorString()}")
        sf.write(text.encode(ENCODING))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}: {sf.errorString()}")
