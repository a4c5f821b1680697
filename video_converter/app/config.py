"""
Application Configuration
=========================
Configuration management for the video converter application.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from video_converter.encoding.models import SUPPORTED_FORMATS, normalize_format
from video_converter.storage.activity_log import DEFAULT_LOG_FILE


@dataclass
class AppConfig:
    """
    Application configuration.

    Attributes:
        encoder_binary: Encoder executable name or path
        log_file: Activity log location (appended after each success)
        output_dir: Default output folder (None = the input's folder)
        default_format: Format preselected in the UI
        supported_formats: Formats offered by the format selector
        restrict_formats: Reject formats outside supported_formats
    """

    # Encoder
    encoder_binary: str = "ffmpeg"

    # Files
    log_file: Path = field(default_factory=lambda: Path(DEFAULT_LOG_FILE))
    output_dir: Optional[Path] = None

    # Formats
    default_format: str = "mp4"
    supported_formats: tuple = SUPPORTED_FORMATS
    restrict_formats: bool = True

    def __post_init__(self):
        """Coerce paths and normalize format tokens."""
        self.log_file = Path(self.log_file)
        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)

        self.supported_formats = tuple(
            fmt for fmt in (normalize_format(value) for value in self.supported_formats) if fmt
        )
        self.default_format = normalize_format(self.default_format)

        if self.restrict_formats and self.default_format not in self.supported_formats:
            raise ValueError(
                f"Default format '{self.default_format}' is not one of "
                f"{', '.join(self.supported_formats)}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AppConfig":
        """
        Create config from dictionary.

        Args:
            config_dict: Configuration dictionary

        Returns:
            AppConfig instance
        """
        path_fields = {"log_file", "output_dir"}
        processed = {}

        for key, value in config_dict.items():
            if key in path_fields and value is not None:
                processed[key] = Path(value)
            elif key == "supported_formats" and value is not None:
                processed[key] = tuple(value)
            else:
                processed[key] = value

        return cls(**processed)

    def to_dict(self) -> dict:
        """
        Convert config to dictionary.

        Returns:
            Configuration dictionary
        """
        return {
            "encoder_binary": self.encoder_binary,
            "log_file": str(self.log_file),
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "default_format": self.default_format,
            "supported_formats": list(self.supported_formats),
            "restrict_formats": self.restrict_formats,
        }
