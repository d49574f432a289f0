from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import pytest

from docpad.domain.models import SaveChoice
from docpad.services.file_service import FileService
from docpad.services.ui.ports import IFileDialogService, IMessageService
from docpad.services.ui.presenters import DocumentPresenter, IDocumentView

# ------------------------------
# Fakes
# ------------------------------


class FakeView:
    def __init__(self) -> None:
        self.text = ""
        self.title = ""
        self.window_modified = False
        self.recents: list[str] = []
        self.status: list[str] = []
        self.presenter: DocumentPresenter | None = None

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text
        # a real editor emits textChanged here
        if self.presenter is not None:
            self.presenter.mark_modified()

    def set_title(self, title: str) -> None:
        self.title = title

    def set_window_modified(self, modified: bool) -> None:
        self.window_modified = modified

    def set_recents(self, items: list[str]) -> None:
        self.recents = items

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.status.append(text)

    def type(self, text: str) -> None:
        self.set_text(text)


class FakeFiles:
    def __init__(self) -> None:
        self.disk: dict[Path, str] = {}
        self.fail_writes = False

    def read_text(self, path: Path) -> str:
        try:
            return self.disk[path]
        except KeyError:
            raise FileNotFoundError(path)  # noqa: B904

    def write_text_atomic(self, path: Path, text: str) -> None:
        if self.fail_writes:
            raise OSError(f"Commit failed for: {path}")
        self.disk[path] = text


class FakeSettings:
    def __init__(self, recent: Iterable[str] = ()) -> None:
        self.recent = list(recent)

    def get_geometry(self) -> bytes | None:
        return None

    def set_geometry(self, blob: bytes) -> None:
        pass

    def get_recent(self) -> list[str]:
        return list(self.recent)

    def set_recent(self, recent: Iterable[str]) -> None:
        self.recent = list(recent)


class FakeMessages:
    def __init__(self) -> None:
        self.choice = SaveChoice.CANCEL
        self.asked: list[str] = []

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask(self, parent: Any | None, title: str, text: str) -> bool:
        return True

    def ask_save_changes(self, parent: Any | None, title: str, text: str) -> SaveChoice:
        self.asked.append(title)
        return self.choice


class FakeDialogs:
    def __init__(self) -> None:
        self.open_answer: Path | None = None
        self.save_answer: Path | None = None
        self.save_calls: list[Path | None] = []
        self.open_dirs: list[Path | None] = []
        self.filters: list[str] = []

    def choose_open_path(self, start_dir: Path | None, filter_str: str) -> Path | None:
        self.open_dirs.append(start_dir)
        self.filters.append(filter_str)
        return self.open_answer

    def choose_save_path(self, start_path: Path | None, filter_str: str) -> Path | None:
        self.save_calls.append(start_path)
        self.filters.append(filter_str)
        return self.save_answer


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def files() -> FakeFiles:
    return FakeFiles()


@pytest.fixture()
def settings() -> FakeSettings:
    return FakeSettings()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def presenter(view, files, settings, messages, dialogs) -> DocumentPresenter:
    p = DocumentPresenter(
        view=view,
        files=files,
        settings=settings,
        messages=messages,
        dialogs=dialogs,
        app_title="Pad",
        file_filter="Text (*.txt)",
        max_recents=3,
    )
    view.presenter = p
    p.on_change()
    return p


# ------------------------------
# Tests
# ------------------------------


def test_fakes_satisfy_ports(view, messages, dialogs):
    assert isinstance(view, IDocumentView)
    assert isinstance(messages, IMessageService)
    assert isinstance(dialogs, IFileDialogService)


def test_initial_title_is_untitled(presenter: DocumentPresenter, view: FakeView):
    assert view.title == "Untitled — Pad"
    assert view.window_modified is False


def test_typing_marks_modified_and_updates_title(presenter: DocumentPresenter, view: FakeView):
    view.type("hello")
    assert presenter.modified is True
    assert view.title == "Untitled • — Pad"
    assert view.window_modified is True


def test_save_untitled_writes_chosen_file(presenter, view, files, dialogs, tmp_path):
    dest = tmp_path / "report.txt"
    dialogs.save_answer = dest
    view.type("body")

    assert presenter.save() is True
    assert files.disk[dest] == "body"
    assert presenter.filepath == dest
    assert presenter.modified is False
    assert view.title == "report — Pad"
    assert view.status[-1] == f"Saved: {dest}"
    assert dialogs.filters == ["Text (*.txt)"]


def test_save_as_starts_dialog_at_current_path(presenter, view, files, dialogs, tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    dialogs.save_answer = first
    presenter.save()

    dialogs.save_answer = second
    assert presenter.save_as() is True
    assert dialogs.save_calls == [None, first]
    assert presenter.filepath == second


def test_open_loads_text_without_marking_modified(presenter, view, files, dialogs, tmp_path):
    src = tmp_path / "in.txt"
    files.disk[src] = "loaded"
    dialogs.open_answer = src

    assert presenter.open() is True
    assert view.text == "loaded"
    assert presenter.modified is False
    assert view.title == "in — Pad"


def test_open_dialog_starts_in_current_directory(presenter, files, dialogs, tmp_path):
    src = tmp_path / "docs" / "in.txt"
    files.disk[src] = "x"
    presenter.open_path(src)

    presenter.open()
    assert dialogs.open_dirs == [tmp_path / "docs"]


def test_new_clears_editor_without_marking_modified(presenter, view, files, tmp_path):
    src = tmp_path / "in.txt"
    files.disk[src] = "loaded"
    presenter.open_path(src)

    assert presenter.new() is True
    assert view.text == ""
    assert presenter.filepath is None
    assert presenter.modified is False


def test_new_with_unsaved_changes_asks(presenter, view, messages):
    view.type("draft")
    messages.choice = SaveChoice.CANCEL

    assert presenter.new() is False
    assert messages.asked == ["Save changes?"]
    assert view.text == "draft"
    assert presenter.modified is True


def test_guard_save_then_new(presenter, view, files, messages, dialogs, tmp_path):
    dest = tmp_path / "kept.txt"
    view.type("keep me")
    messages.choice = SaveChoice.SAVE
    dialogs.save_answer = dest

    assert presenter.new() is True
    assert files.disk[dest] == "keep me"
    assert view.text == ""
    assert presenter.filepath is None


def test_open_failure_restores_previous_path(presenter, view, files, tmp_path):
    good = tmp_path / "good.txt"
    files.disk[good] = "ok"
    presenter.open_path(good)

    with pytest.raises(FileNotFoundError):
        presenter.open_path(tmp_path / "missing.txt")

    assert presenter.filepath == good
    assert view.text == "ok"


def test_save_as_failure_restores_previous_path(presenter, view, files, dialogs, tmp_path):
    good = tmp_path / "good.txt"
    dialogs.save_answer = good
    view.type("v1")
    presenter.save()

    view.type("v2")
    files.fail_writes = True
    dialogs.save_answer = tmp_path / "other.txt"
    with pytest.raises(OSError):
        presenter.save_as()

    assert presenter.filepath == good
    assert presenter.modified is True


def test_can_close_uses_guard(presenter, view, messages):
    assert presenter.can_close() is True
    view.type("x")
    messages.choice = SaveChoice.CANCEL
    assert presenter.can_close() is False
    messages.choice = SaveChoice.DISCARD
    assert presenter.can_close() is True


def test_recents_are_most_recent_first_and_capped(presenter, view, files, settings, tmp_path):
    paths = [tmp_path / f"{n}.txt" for n in "abcd"]
    for p in paths:
        files.disk[p] = p.stem
        presenter.open_path(p)
    presenter.open_path(paths[1])

    expected = [str(paths[1]), str(paths[3]), str(paths[2])]
    assert presenter.recents == expected
    assert settings.recent == expected
    assert view.recents == expected


def test_forget_recent(presenter, view, files, settings, tmp_path):
    p = tmp_path / "gone.txt"
    files.disk[p] = ""
    presenter.open_path(p)

    presenter.forget_recent(p)
    assert presenter.recents == []
    assert settings.recent == []
    assert view.recents == []


def test_recents_loaded_from_settings(view, files, messages, dialogs):
    settings = FakeSettings(["1", "2", "3", "4"])
    p = DocumentPresenter(view, files, settings, messages, dialogs, max_recents=2)
    assert p.recents == ["1", "2"]


def test_open_non_utf8_file_keeps_previous_document(view, settings, messages, dialogs, tmp_path):
    good = tmp_path / "good.txt"
    good.write_text("hello", encoding="utf-8")
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9")
    p = DocumentPresenter(view, FileService(), settings, messages, dialogs)
    view.presenter = p
    p.open_path(good)

    with pytest.raises(OSError, match="Not a UTF-8 text file"):
        p.open_path(bad)

    assert p.filepath == good
    assert view.text == "hello"
    assert p.modified is False
    assert settings.recent == [str(good)]


@pytest.mark.parametrize("hook", ["load", "store"])
def test_file_hooks_require_a_path(presenter: DocumentPresenter, hook: str):
    with pytest.raises(RuntimeError, match="No file path"):
        getattr(presenter, hook)()
