"""
Error Handling Module
=====================
Custom exceptions and error handling utilities for the Video Converter.
Provides consistent error codes and messages for edge cases.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorCode(Enum):
    """Error codes for the video converter."""
    # Validation errors (E001-E099)
    E001 = "Input file not found"
    E002 = "No input file selected"
    E003 = "Unsupported target format"
    E004 = "Invalid output path"

    # Encoder errors (E100-E199)
    E100 = "Encoder could not be launched"
    E101 = "Encoder exited with an error"


@dataclass(eq=False)
class ConverterError(Exception):
    """Base exception for the Video Converter with error codes."""
    code: ErrorCode
    message: str
    details: Optional[str] = None
    file_path: Optional[Path] = None

    def __str__(self) -> str:
        base = f"[{self.code.name}] {self.code.value}: {self.message}"
        if self.details:
            base += f" ({self.details})"
        if self.file_path:
            base += f" - File: {self.file_path}"
        return base


# ===========================================
# Validation (raised before the encoder runs)
# ===========================================

class ValidationError(ConverterError):
    """User input is incomplete or inconsistent."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.E004,
        details: str = None,
        file_path: Path = None,
    ):
        super().__init__(
            code=code,
            message=message,
            details=details,
            file_path=file_path
        )


class MissingInputError(ValidationError):
    """Error when the selected input file does not exist."""
    def __init__(self, file_path: Path):
        super().__init__(
            "Selected file doesn't exist!",
            code=ErrorCode.E001,
            file_path=file_path
        )


class UnsupportedFormatError(ValidationError):
    """Error when the target format is outside the allow-list."""
    def __init__(self, target_format: str, allowed: tuple = ()):
        super().__init__(
            f"Unsupported target format: {target_format or '(empty)'}",
            code=ErrorCode.E003,
            details=f"Supported: {', '.join(allowed)}" if allowed else None
        )


# ===========================================
# Encoder process errors
# ===========================================

class LaunchError(ConverterError):
    """Error when the encoder process cannot be started at all."""
    def __init__(self, message: str, binary: str = None):
        super().__init__(
            code=ErrorCode.E100,
            message=message,
            details=binary
        )

    @property
    def diagnostic(self) -> str:
        return self.message


class EncoderNotFoundError(LaunchError):
    """Error when FFmpeg is not installed."""

    INSTALL_INSTRUCTIONS = """FFmpeg is required but not found in PATH.

Installation instructions:
  macOS:    brew install ffmpeg
  Ubuntu:   sudo apt update && sudo apt install ffmpeg
  Windows:  winget install Gyan.FFmpeg
            or download from: https://ffmpeg.org/download.html

After installation, ensure 'ffmpeg' is available in your system PATH."""

    def __init__(self, binary: str = "ffmpeg", message: str = None):
        super().__init__(
            message or f"Encoder '{binary}' was not found",
            binary=binary
        )
        self.binary = binary


class InvocationError(ConverterError):
    """Error when the encoder ran but exited with a non-zero status.

    The encoder's diagnostic output is kept verbatim so it can be shown
    to the user unchanged.
    """
    def __init__(self, diagnostic: str, exit_code: int = None):
        super().__init__(
            code=ErrorCode.E101,
            message=f"exit code {exit_code}" if exit_code is not None else "encoder failed",
            details=diagnostic
        )
        self.exit_code = exit_code

    @property
    def diagnostic(self) -> str:
        return self.details or ""


# ===========================================
# Utility Functions
# ===========================================

# Characters not allowed in filenames on various OSes
INVALID_FILENAME_CHARS = r'[<>:"/\\|?*\x00-\x1f]'


def sanitize_filename(filename: str, replacement: str = "_") -> str:
    """
    Sanitize a filename by replacing invalid characters.

    Args:
        filename: Original filename (a base name, not a path)
        replacement: Substitute for each invalid character

    Returns:
        Sanitized filename safe for all operating systems
    """
    sanitized = re.sub(INVALID_FILENAME_CHARS, replacement, filename)

    # Remove leading/trailing spaces and dots
    sanitized = sanitized.strip(' .')

    if not sanitized:
        sanitized = "untitled"

    # Limit length (255 bytes for most filesystems, keep some margin)
    if len(sanitized.encode('utf-8')) > 200:
        # Truncate while preserving extension
        name, ext = Path(sanitized).stem, Path(sanitized).suffix
        if len(ext.encode('utf-8')) > 16:
            # Not a real extension, truncate the whole name
            name, ext = sanitized, ""
        max_name_len = 200 - len(ext.encode('utf-8'))
        name = name.encode('utf-8')[:max_name_len].decode('utf-8', errors='ignore')
        sanitized = name + ext

    return sanitized


def has_invalid_chars(filename: str) -> bool:
    """Check whether a base name contains characters invalid in filenames."""
    return re.search(INVALID_FILENAME_CHARS, filename) is not None
