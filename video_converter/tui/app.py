"""
Textual TUI App
===============
Single-screen workflow: pick a video, pick a format, convert, read the status.
"""

from __future__ import annotations

import threading
from collections import deque
from pathlib import Path
from typing import Callable, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.reactive import reactive
from textual.widgets import Button, Footer, Header, Input, RichLog, Select, Static

from video_converter.app import AppConfig, AppController, ConversionCallbacks
from video_converter.app.events import AppEvent, EventType
from video_converter.encoding.models import expand_user_path
from video_converter.errors import ValidationError
from video_converter.tui.screens.dashboard import ConverterShell
from video_converter.tui.screens.picker import PathPickerModal, PickerMode, normalize_path_input
from video_converter.tui.styles import APP_CSS


# Extensions shown by the input file picker
VIDEO_SUFFIXES = {
    ".avi", ".flv", ".m4v", ".mkv", ".mov", ".mp4",
    ".mpeg", ".mpg", ".ts", ".webm", ".wmv",
}


class VideoConverterTUI(App):
    """Terminal front end for converting one video at a time."""

    TITLE = "Video Converter"

    CSS = APP_CSS

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+r", "convert", "Convert"),
        ("ctrl+o", "browse_input", "Browse"),
        ("ctrl+d", "browse_output", "Folder"),
    ]

    current_status = reactive("idle")

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        controller: Optional[AppController] = None,
    ):
        super().__init__()
        self.controller = controller or AppController(config)
        self._messages: deque[str] = deque(maxlen=500)
        self._ui_thread: Optional[int] = None
        self.status_message = ""

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ConverterShell(
            self.controller.supported_formats,
            self.controller.config.default_format,
            id="root",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._ui_thread = threading.get_ident()
        self.controller.notifier.subscribe(self._on_conversion_complete)
        self._log("ready")
        if not self.controller.encoder_available():
            self._log(
                f"[warning] encoder '{self.controller.encoder.binary}' not found on PATH; "
                "conversions will fail until it is installed"
            )
        self.query_one("#input-path", Input).focus()

    def _log(self, message: str) -> None:
        self._messages.append(message)
        log = self.query_one("#log-view", RichLog)
        log.write(message)

    def _set_status(self, message: str, error: bool = False) -> None:
        self.status_message = message
        status = self.query_one("#status-text", Static)
        # Encoder diagnostics contain [brackets]; render them literally.
        status.update(Text(message))
        status.set_class(error, "-error")

    def _emit_event(self, event: AppEvent) -> None:
        if event.event_type == EventType.LOG:
            self._log(f"[{event.level}] {event.message}")
        elif event.event_type == EventType.STATE:
            self.current_status = event.state.value
            if event.message:
                self._log(f"[state] {event.job_id}: {event.message}")

    def _run_on_ui(self, callback: Callable, *args) -> None:
        # Worker thread callbacks are marshalled onto the UI thread.
        if threading.get_ident() == self._ui_thread:
            callback(*args)
        else:
            self.call_from_thread(callback, *args)

    def _make_callbacks(self) -> ConversionCallbacks:
        def on_event(event: AppEvent) -> None:
            self._run_on_ui(self._emit_event, event)

        def on_error(message: str) -> None:
            self._run_on_ui(self._show_error, message)

        return ConversionCallbacks(on_event=on_event, on_error=on_error)

    def _on_conversion_complete(self, output_path: Path) -> None:
        self._run_on_ui(self._show_success, output_path)

    def _show_success(self, output_path: Path) -> None:
        self._set_status(f"Conversion complete! Output file: {output_path}")

    def _show_error(self, message: str) -> None:
        # Covers both encoder failures and jobs that crashed before an outcome.
        self._set_status(f"Error during conversion: {message}", error=True)

    @staticmethod
    def _optional_value(raw: str) -> Optional[str]:
        value = normalize_path_input(raw)
        return value or None

    def action_convert(self) -> None:
        input_path = self._optional_value(self.query_one("#input-path", Input).value)
        target_format = str(self.query_one("#format-select", Select).value)
        output_dir = self._optional_value(self.query_one("#output-dir", Input).value)
        output_name = self.query_one("#output-name", Input).value.strip() or None

        try:
            job = self.controller.start_conversion(
                input_path=input_path,
                target_format=target_format,
                output_dir=output_dir,
                output_name=output_name,
                callbacks=self._make_callbacks(),
            )
        except ValidationError as exc:
            self._set_status(exc.message, error=True)
            self._log(f"[error] {exc}")
            return

        self._set_status(f"Converting to {job.request.target_format}...")
        self._log(f"started {job.id}: {job.request.input_path} -> {job.request.output_path}")

    def action_browse_input(self) -> None:
        current = self._optional_value(self.query_one("#input-path", Input).value)
        modal = PathPickerModal(
            mode=PickerMode.FILE,
            initial=expand_user_path(current) if current else None,
            suffixes=VIDEO_SUFFIXES,
        )
        self.push_screen(modal, self._on_input_picked)

    def _on_input_picked(self, path: Optional[Path]) -> None:
        if path is None:
            return
        self.query_one("#input-path", Input).value = str(path)
        self._log(f"input: {path}")

    def action_browse_output(self) -> None:
        current = self._optional_value(self.query_one("#output-dir", Input).value)
        modal = PathPickerModal(
            mode=PickerMode.DIRECTORY,
            initial=expand_user_path(current) if current else None,
        )
        self.push_screen(modal, self._on_output_picked)

    def _on_output_picked(self, path: Optional[Path]) -> None:
        if path is None:
            return
        self.query_one("#output-dir", Input).value = str(path)
        self._log(f"output folder: {path}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "convert":
            self.action_convert()
        elif event.button.id == "browse-input":
            self.action_browse_input()
        elif event.button.id == "browse-output":
            self.action_browse_output()

    def on_unmount(self) -> None:
        self.controller.cleanup()
