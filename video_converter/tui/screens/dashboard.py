"""
Main screen shell: conversion form on the left, log pane on the right.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Input, RichLog, Select, Static


class ConverterShell(Container):
    """Action bar, conversion form with status line, and log pane."""

    def __init__(self, formats: tuple, default_format: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.formats = formats
        self.default_format = default_format

    def compose(self) -> ComposeResult:
        format_options = [(fmt.upper(), fmt) for fmt in self.formats]
        default_format = self.default_format
        if not any(value == default_format for _, value in format_options):
            default_format = format_options[0][1]

        with Horizontal(id="actions"):
            yield Button("Convert (^r)", id="convert", classes="-primary")
            yield Button("Browse (^o)", id="browse-input")
            yield Button("Folder (^d)", id="browse-output")
            yield Static("Video converter", classes="label")
        with Horizontal(id="panes"):
            with Vertical(id="form-pane"):
                yield Static("Input File:", classes="label")
                with Horizontal(classes="path-row field"):
                    yield Input(placeholder="/path/to/video.mov", id="input-path")
                yield Static("Target Format:", classes="label")
                yield Select(
                    format_options,
                    value=default_format,
                    allow_blank=False,
                    prompt="Format",
                    id="format-select",
                    classes="field",
                )
                yield Static("Output Folder (optional):", classes="label")
                with Horizontal(classes="path-row field"):
                    yield Input(placeholder="same folder as input", id="output-dir")
                yield Static("Output Name (optional):", classes="label")
                yield Input(placeholder="same name as input", id="output-name", classes="field")
                yield Static("", id="status-text")
            with Vertical(id="log-pane"):
                yield Static("Logs", classes="label")
                yield RichLog(id="log-view", wrap=True, highlight=True)
