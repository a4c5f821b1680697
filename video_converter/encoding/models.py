"""
Conversion Data Models
======================
Request and outcome types for a single encoder invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from video_converter.errors import (
    ConverterError,
    ErrorCode,
    MissingInputError,
    UnsupportedFormatError,
    ValidationError,
    sanitize_filename,
)


# Container formats offered by the format selector
SUPPORTED_FORMATS = ("mp4", "mov", "avi", "mkv", "webm")


def normalize_format(target_format: str) -> str:
    """Normalize a format token: ' .MP4 ' -> 'mp4'."""
    return (target_format or "").strip().lstrip(".").lower()


def expand_user_path(value: Union[Path, str]) -> Optional[Path]:
    """Expand a leading ~ or ~user; None when that home folder cannot be found."""
    try:
        return Path(value).expanduser()
    except RuntimeError:
        return None


def derive_output_path(
    input_path: Path,
    target_format: str,
    output_dir: Optional[Path] = None,
    output_name: Optional[str] = None,
) -> Path:
    """
    Compute where the converted file is written.

    Without ``output_name`` the input's extension is replaced by the
    target format. A caller-supplied name is sanitized and receives the
    format extension unless it already carries it.

    Args:
        input_path: Source video
        target_format: Normalized format token (e.g. 'mp4')
        output_dir: Destination folder (defaults to the input's folder)
        output_name: Optional base name chosen by the user

    Returns:
        Output file path
    """
    directory = Path(output_dir) if output_dir else input_path.parent
    extension = f".{target_format}"

    if output_name and output_name.strip():
        name = sanitize_filename(output_name.strip())
        if not name.lower().endswith(extension):
            name += extension
    else:
        name = input_path.stem + extension

    return directory / name


@dataclass(frozen=True)
class ConversionRequest:
    """One conversion: source file, target format and destination."""

    input_path: Path
    target_format: str
    output_path: Path

    @classmethod
    def create(
        cls,
        input_path: Union[Path, str, None],
        target_format: str,
        output_dir: Union[Path, str, None] = None,
        output_name: Optional[str] = None,
        allowed_formats: Optional[Iterable[str]] = None,
    ) -> "ConversionRequest":
        """
        Validate user selections and build a request.

        Raises:
            ValidationError: Missing selections, unsupported format, or an
                output path that would overwrite the input
        """
        if input_path is None or not str(input_path).strip():
            raise ValidationError("Please select a file first!", code=ErrorCode.E002)

        source = expand_user_path(input_path)
        if source is None or not source.is_file():
            raise MissingInputError(source or Path(input_path))

        fmt = normalize_format(target_format)
        if not fmt:
            raise UnsupportedFormatError(fmt)

        if allowed_formats is not None:
            allowed = tuple(normalize_format(value) for value in allowed_formats)
            if fmt not in allowed:
                raise UnsupportedFormatError(fmt, allowed)

        destination = None
        if output_dir:
            destination = expand_user_path(output_dir)
            if destination is None:
                raise ValidationError(
                    "Output folder not found",
                    code=ErrorCode.E004,
                    file_path=Path(output_dir),
                )

        output_path = derive_output_path(
            source,
            fmt,
            output_dir=destination,
            output_name=output_name,
        )

        if output_path.resolve() == source.resolve():
            raise ValidationError(
                "Output file would overwrite the input file",
                code=ErrorCode.E004,
                details="choose another format, folder or name",
                file_path=output_path,
            )

        return cls(input_path=source, target_format=fmt, output_path=output_path)


@dataclass(frozen=True)
class ConversionSuccess:
    """The encoder exited with status 0."""

    output_path: Path
    diagnostic: str = ""

    @property
    def succeeded(self) -> bool:
        return True

    def raise_for_error(self) -> "ConversionSuccess":
        return self


@dataclass(frozen=True)
class ConversionFailure:
    """The encoder could not be launched or exited with an error."""

    diagnostic: str
    error: ConverterError
    exit_code: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return False

    def raise_for_error(self) -> "ConversionSuccess":
        raise self.error


ConversionOutcome = Union[ConversionSuccess, ConversionFailure]
