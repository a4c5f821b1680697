"""
Activity Log
============
Appends one human-readable line per completed conversion to a flat text file.

Logging here is best-effort: a write failure is reported through the module
logger and never reaches the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "conversion_log.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogEntry:
    """A single completed conversion."""

    timestamp: datetime
    input_name: str
    output_name: str
    target_format: str

    @classmethod
    def from_paths(
        cls,
        input_path: Union[Path, str],
        output_path: Union[Path, str],
        target_format: str,
        timestamp: Optional[datetime] = None,
    ) -> "LogEntry":
        """Build an entry from full paths, keeping only the base names."""
        return cls(
            timestamp=timestamp or datetime.now(),
            input_name=Path(input_path).name,
            output_name=Path(output_path).name,
            target_format=target_format,
        )

    def format_line(self) -> str:
        return (
            f"{self.timestamp.strftime(TIMESTAMP_FORMAT)}: "
            f"Converted '{self.input_name}' to '{self.output_name}' "
            f"(format: {self.target_format})"
        )


class ActivityLogger:
    """
    Append-only conversion log.

    The file is opened, appended and closed on every call. There is no lock,
    so concurrent writers may interleave whole lines.
    """

    def __init__(self, log_path: Union[Path, str] = DEFAULT_LOG_FILE):
        self.log_path = Path(log_path)

    def log(
        self,
        input_path: Union[Path, str],
        output_path: Union[Path, str],
        target_format: str,
    ) -> bool:
        """
        Append a line describing a completed conversion.

        Args:
            input_path: Source video
            output_path: Converted file
            target_format: Format token the file was converted to

        Returns:
            True if the line was written, False if the write failed
        """
        entry = LogEntry.from_paths(input_path, output_path, target_format)
        try:
            # Undecodable filename bytes arrive as surrogates; write them escaped.
            with open(self.log_path, "a", encoding="utf-8", errors="backslashreplace") as handle:
                handle.write(entry.format_line() + "\n")
        except (OSError, ValueError) as exc:
            logger.warning("Could not write activity log %s: %s", self.log_path, exc)
            return False
        return True
