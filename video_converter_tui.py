#!/usr/bin/env python3
"""
Video Converter TUI launcher.

Usage:
    python video_converter_tui.py
"""

from __future__ import annotations

import argparse
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="video-converter",
        description="Convert a video to another container format with FFmpeg.",
    )


def configure_logging(level: int = logging.INFO) -> None:
    """Route log records to the Textual devtools console instead of the terminal."""
    from textual.logging import TextualHandler

    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def main(argv: list[str] | None = None) -> int:
    build_parser().parse_args(argv)

    try:
        from video_converter.tui.app import VideoConverterTUI
    except ImportError:
        print("error: Textual is not installed. Run `pip install textual rich`.", file=sys.stderr)
        return 1

    configure_logging()
    app = VideoConverterTUI()
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
