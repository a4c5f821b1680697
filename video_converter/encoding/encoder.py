"""
Video Encoder Module
====================
FFmpeg-based container conversion.
Builds the encoder command line, runs it as a child process and
classifies the result as a ConversionOutcome.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

from video_converter.encoding.models import (
    ConversionFailure,
    ConversionOutcome,
    ConversionRequest,
    ConversionSuccess,
)
from video_converter.encoding.notifier import ConversionNotifier
from video_converter.errors import EncoderNotFoundError, InvocationError, LaunchError

logger = logging.getLogger(__name__)

# Keeps Windows from flashing a console window for the child process.
_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)


class VideoEncoder:
    """
    FFmpeg-based video converter.

    Runs ``<binary> -y -i <input> <output>`` and lets the encoder pick the
    container from the output file extension.
    """

    def __init__(self, binary: str = "ffmpeg", notifier: Optional[ConversionNotifier] = None):
        """
        Initialize the video encoder.

        Args:
            binary: Encoder executable name or path (default 'ffmpeg')
            notifier: Signalled with the output path after each success
        """
        self.binary = binary
        self.notifier = notifier or ConversionNotifier()

    def is_available(self) -> bool:
        """Check if the encoder binary can be found in PATH."""
        return shutil.which(self.binary) is not None

    def build_command(self, request: ConversionRequest) -> list[str]:
        """Build the encoder argument vector for a request."""
        return [
            self.binary,
            "-y",  # Overwrite output
            "-i", str(request.input_path),
            str(request.output_path),
        ]

    def convert(self, request: ConversionRequest) -> ConversionOutcome:
        """
        Convert a video file.

        Standard error is drained while the child runs, so a chatty
        encoder cannot block on a full pipe. There is no timeout.

        Args:
            request: What to convert and where to write it

        Returns:
            ConversionSuccess carrying ``request.output_path``, or
            ConversionFailure carrying the raw diagnostic text
        """
        cmd = self.build_command(request)
        logger.info("Converting %s to %s", request.input_path, request.output_path)
        logger.debug("Encoder command: %s", cmd)

        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                creationflags=_NO_WINDOW,
            )
        except FileNotFoundError as exc:
            logger.error("Encoder not found: %s", self.binary)
            return ConversionFailure(
                diagnostic=str(exc),
                error=EncoderNotFoundError(self.binary, message=str(exc)),
            )
        except OSError as exc:
            logger.error("Failed to launch encoder %s: %s", self.binary, exc)
            return ConversionFailure(
                diagnostic=str(exc),
                error=LaunchError(str(exc), binary=self.binary),
            )

        diagnostic = (result.stderr or b"").decode("utf-8", errors="replace")

        if result.returncode != 0:
            logger.error(
                "Encoder exited with code %d converting %s",
                result.returncode,
                request.input_path,
            )
            return ConversionFailure(
                diagnostic=diagnostic,
                error=InvocationError(diagnostic, result.returncode),
                exit_code=result.returncode,
            )

        logger.info("Conversion complete: %s", request.output_path)
        self.notifier.notify(request.output_path)
        return ConversionSuccess(output_path=request.output_path, diagnostic=diagnostic)
