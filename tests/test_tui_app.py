"""
Test TUI App
============
Script-style tests driving VideoConverterTUI with Textual's pilot.
"""

import asyncio
import sys
import tempfile
from pathlib import Path

from textual.widgets import Input, Select

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from video_converter.app import AppConfig, AppController
from video_converter.encoding.models import ConversionFailure, ConversionSuccess
from video_converter.encoding.notifier import ConversionNotifier
from video_converter.errors import InvocationError


class FakeEncoder:
    """Stands in for VideoEncoder without launching a process."""

    binary = "fake-ffmpeg"

    def __init__(self, fail: bool = False, available: bool = True, crash: bool = False):
        self.notifier = ConversionNotifier()
        self.fail = fail
        self.crash = crash
        self.available = available
        self.requests = []

    def is_available(self) -> bool:
        return self.available

    def convert(self, request):
        self.requests.append(request)
        if self.crash:
            raise RuntimeError("encoder crashed")
        if self.fail:
            diagnostic = "Invalid data found when processing input\n"
            return ConversionFailure(
                diagnostic=diagnostic,
                error=InvocationError(diagnostic, 1),
                exit_code=1,
            )
        self.notifier.notify(request.output_path)
        return ConversionSuccess(output_path=request.output_path)


def _make_app(tmp: Path, encoder: FakeEncoder):
    from video_converter.tui.app import VideoConverterTUI

    config = AppConfig(log_file=tmp / "conversion_log.txt")
    return VideoConverterTUI(controller=AppController(config, encoder=encoder))


async def _wait_for_status(app, pilot, prefix: str) -> None:
    for _ in range(100):
        await pilot.pause(0.05)
        if app.status_message.startswith(prefix):
            return
    raise AssertionError(f"status never reached {prefix!r}: {app.status_message!r}")


async def _wait_for_state(app, pilot, state: str) -> None:
    for _ in range(100):
        if app.current_status == state:
            return
        await pilot.pause(0.05)
    raise AssertionError(f"job state never reached {state!r}: {app.current_status!r}")


async def _test_widget_tree_async(tmp: Path) -> None:
    app = _make_app(tmp, FakeEncoder(available=False))
    async with app.run_test() as pilot:
        for selector in ["#actions", "#panes", "#form-pane", "#log-pane", "#convert",
                         "#browse-input", "#browse-output", "#input-path", "#output-dir",
                         "#output-name", "#status-text", "#log-view"]:
            app.query_one(selector)
        assert app.query_one("#format-select", Select).value == "mp4"
        assert any("not found on PATH" in message for message in app._messages)
        await pilot.pause()


async def _test_validation_messages_async(tmp: Path) -> None:
    encoder = FakeEncoder()
    app = _make_app(tmp, encoder)
    async with app.run_test() as pilot:
        app.action_convert()
        assert app.status_message == "Please select a file first!"

        app.query_one("#input-path", Input).value = str(tmp / "missing.mov")
        app.action_convert()
        assert app.status_message == "Selected file doesn't exist!"

        app.query_one("#input-path", Input).value = "~no_such_user_for_video_converter/clip.mov"
        app.action_convert()
        assert app.status_message == "Selected file doesn't exist!"
        await pilot.pause()

    assert encoder.requests == []


async def _test_successful_conversion_async(tmp: Path) -> None:
    source = tmp / "sample.mkv"
    source.write_bytes(b"data")
    encoder = FakeEncoder()
    app = _make_app(tmp, encoder)

    async with app.run_test() as pilot:
        app.query_one("#input-path", Input).value = f"'{source}'"
        app.query_one("#format-select", Select).value = "webm"
        app.query_one("#output-name", Input).value = "trip: day 1"
        app.action_convert()
        assert app.status_message == "Converting to webm..."

        await _wait_for_status(app, pilot, "Conversion complete!")
        assert app.status_message == f"Conversion complete! Output file: {tmp / 'trip_ day 1.webm'}"

    assert len(encoder.requests) == 1
    lines = (tmp / "conversion_log.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert "sample.mkv" in lines[0] and "trip_ day 1.webm" in lines[0]


async def _test_failed_conversion_async(tmp: Path) -> None:
    source = tmp / "broken.avi"
    source.write_bytes(b"data")
    app = _make_app(tmp, FakeEncoder(fail=True))

    async with app.run_test() as pilot:
        app.query_one("#input-path", Input).value = str(source)
        app.action_convert()
        await _wait_for_status(app, pilot, "Error during conversion:")
        assert app.status_message == "Error during conversion: Invalid data found when processing input\n"
        await _wait_for_state(app, pilot, "failed")


async def _test_crashed_conversion_async(tmp: Path) -> None:
    source = tmp / "sample.mov"
    source.write_bytes(b"data")
    app = _make_app(tmp, FakeEncoder(crash=True))

    async with app.run_test() as pilot:
        app.query_one("#input-path", Input).value = str(source)
        app.action_convert()
        await _wait_for_status(app, pilot, "Error during conversion:")
        assert app.status_message == "Error during conversion: encoder crashed"
        await _wait_for_state(app, pilot, "failed")

    assert not (tmp / "conversion_log.txt").exists()


def _run(coro_factory) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        asyncio.run(coro_factory(Path(tmp).resolve()))


def test_tui_app() -> bool:
    print("\n" + "=" * 50)
    print("TUI APP TEST SUITE")
    print("=" * 50 + "\n")

    _run(_test_widget_tree_async)
    print("✓ app widget tree and encoder warning")

    _run(_test_validation_messages_async)
    print("✓ validation messages")

    _run(_test_successful_conversion_async)
    print("✓ successful conversion updates status and log")

    _run(_test_failed_conversion_async)
    print("✓ failed conversion shows diagnostic")

    _run(_test_crashed_conversion_async)
    print("✓ crashed job replaces the converting status")

    print("\n" + "=" * 50)
    print("ALL TUI APP TESTS PASSED ✓")
    print("=" * 50 + "\n")
    return True


if __name__ == "__main__":
    success = test_tui_app()
    sys.exit(0 if success else 1)
