from __future__ import annotations

from enum import Enum, auto


class SaveChoice(Enum):
    """Answer to "save changes before continuing?"."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()
