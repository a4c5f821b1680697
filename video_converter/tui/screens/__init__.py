"""
TUI screens package.
"""

from video_converter.tui.screens.dashboard import ConverterShell
from video_converter.tui.screens.picker import PathPickerModal, PickerMode, normalize_path_input

__all__ = ["ConverterShell", "PathPickerModal", "PickerMode", "normalize_path_input"]
