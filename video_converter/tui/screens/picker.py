"""
File and folder picker modal.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import unquote, urlparse

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Static

from video_converter.encoding.models import expand_user_path
from video_converter.tui.styles import PATH_PICKER_CSS


class PickerMode(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


def normalize_path_input(raw: str) -> str:
    """
    Clean up a path pasted from a shell or file manager.

    Handles quoted paths, paths wrapped in parentheses, ``file://`` URIs
    and shell-escaped spaces.
    """
    value = raw.strip()
    if len(value) >= 2 and value.startswith("(") and value.endswith(")"):
        value = value[1:-1]
    value = value.strip().strip("'").strip('"')
    value = value.replace("\\ ", " ")

    if value.startswith("file://"):
        parsed = urlparse(value)
        value = unquote(parsed.path)

    return value


class FilteredDirectoryTree(DirectoryTree):
    """Directory tree that hides dotfiles and, optionally, non-video files."""

    def __init__(
        self,
        path: str,
        *,
        suffixes: Optional[set[str]] = None,
        dirs_only: bool = False,
        **kwargs,
    ) -> None:
        self.suffixes = suffixes
        self.dirs_only = dirs_only
        super().__init__(path, **kwargs)

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        visible = []
        for path in paths:
            if path.name.startswith("."):
                continue
            if path.is_dir():
                visible.append(path)
            elif not self.dirs_only and (
                self.suffixes is None or path.suffix.lower() in self.suffixes
            ):
                visible.append(path)
        return visible


class PathPickerModal(ModalScreen[Optional[Path]]):
    """Modal to pick the input video or the output folder."""

    BINDINGS = [
        ("enter", "submit", "Select"),
        ("escape", "cancel_modal", "Cancel"),
    ]

    CSS = PATH_PICKER_CSS

    def __init__(
        self,
        *,
        mode: PickerMode = PickerMode.FILE,
        initial: Optional[Path] = None,
        suffixes: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__()
        self.mode = mode
        self.initial = initial
        self.suffixes = {suffix.lower() for suffix in suffixes} if suffixes else None

    def compose(self) -> ComposeResult:
        if self.mode == PickerMode.FILE:
            title = "Select Video File"
            help_text = "Choose a video from the tree or paste a path."
        else:
            title = "Select Output Folder"
            help_text = "Choose a folder from the tree or paste a path."

        with Container(id="picker-root"):
            yield Static(title, id="picker-title")
            yield Static(help_text, id="picker-help")
            yield Input(
                value=str(self.initial) if self.initial else "",
                placeholder="/path/to/video.mov" if self.mode == PickerMode.FILE else "/path/to/folder",
                id="picker-input",
            )
            yield FilteredDirectoryTree(
                str(self._tree_root()),
                suffixes=self.suffixes,
                dirs_only=self.mode == PickerMode.DIRECTORY,
                id="picker-tree",
            )
            yield Static("", id="picker-error")
            with Horizontal(id="picker-actions"):
                yield Button("Select", id="confirm", classes="-primary")
                yield Button("Cancel", id="cancel")

    def _tree_root(self) -> Path:
        # Start next to the current selection, else in the home folder.
        if self.initial is not None:
            candidate = self.initial if self.initial.is_dir() else self.initial.parent
            if candidate.is_dir():
                return candidate.resolve()
        return Path.home()

    def _set_error(self, message: str) -> None:
        self.query_one("#picker-error", Static).update(Text(message))

    def _validate(self) -> Optional[Path]:
        raw = self.query_one("#picker-input", Input).value
        if not raw.strip():
            self._set_error("Please select a path.")
            return None

        path = expand_user_path(normalize_path_input(raw))
        if path is None:
            self._set_error(f"Path not found: {raw.strip()}")
            return None

        path = path.resolve()
        if not path.exists():
            self._set_error(f"Path not found: {path}")
            return None

        if self.mode == PickerMode.DIRECTORY:
            if not path.is_dir():
                self._set_error(f"Selected path is not a folder: {path}")
                return None
            return path

        if not path.is_file():
            self._set_error(f"Selected path is not a file: {path}")
            return None

        if self.suffixes is not None and path.suffix.lower() not in self.suffixes:
            suffixes = ", ".join(sorted(self.suffixes))
            self._set_error(f"Unsupported file type: {path.suffix}. Use one of: {suffixes}")
            return None

        return path

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        if self.mode != PickerMode.FILE:
            return
        self.query_one("#picker-input", Input).value = str(event.path)
        self._set_error("")

    def on_directory_tree_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        if self.mode != PickerMode.DIRECTORY:
            return
        self.query_one("#picker-input", Input).value = str(event.path)
        self._set_error("")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "cancel":
            self.dismiss(None)
        elif event.button.id == "confirm":
            self._submit()

    def _submit(self) -> None:
        path = self._validate()
        if path is not None:
            self.dismiss(path)

    def action_submit(self) -> None:
        self._submit()

    def action_cancel_modal(self) -> None:
        self.dismiss(None)
