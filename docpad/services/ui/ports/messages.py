from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from docpad.domain.models import SaveChoice


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for the message boxes DocPad shows. Decouples the window
    and presenter from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask(self, parent: Any | None, title: str, text: str) -> bool:
        """True for Yes, False otherwise."""
        ...

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> SaveChoice:
        """Three-way Save / Discard / Cancel question about unsaved changes."""
        ...
