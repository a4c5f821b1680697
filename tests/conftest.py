import stat
import sys
import textwrap
from pathlib import Path

import pytest

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from video_converter.app.config import AppConfig


STUB_ENCODER_BODY = """
import os
import sys

args = sys.argv[1:]
record = os.environ.get("STUB_ENCODER_ARGS")
if record:
    with open(record, "w", encoding="utf-8") as handle:
        handle.write("\\n".join(args))

mode = os.environ.get("STUB_ENCODER_MODE", "ok")
if mode == "fail":
    sys.stderr.write("Invalid data found when processing input\\n")
    sys.exit(1)
if mode == "flood":
    # 1 MB of diagnostic text, more than any pipe buffer holds
    line = "frame=  100 fps= 25 q=28.0 size=    256kB time=00:00:04.00\\n"
    sys.stderr.write(line * (1024 * 1024 // len(line) + 1))
    sys.exit(int(os.environ.get("STUB_ENCODER_EXIT", "0")))

with open(args[-1], "wb") as handle:
    handle.write(b"converted")
"""


@pytest.fixture
def stub_encoder(tmp_path) -> Path:
    """
    Executable stand-in for ffmpeg.

    Behavior is selected with STUB_ENCODER_MODE (ok, fail, flood); the
    received arguments are written to STUB_ENCODER_ARGS when set.
    """
    if sys.platform == "win32":
        pytest.skip("stub encoder relies on a shebang line")

    script = tmp_path / "bin" / "fake-ffmpeg"
    script.parent.mkdir()
    script.write_text(f"#!{sys.executable}\n" + textwrap.dedent(STUB_ENCODER_BODY))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def sample_video(tmp_path) -> Path:
    """A placeholder input file; the stub encoder never parses it."""
    path = tmp_path / "videos" / "sample.mkv"
    path.parent.mkdir()
    path.write_bytes(b"\x1a\x45\xdf\xa3")
    return path


@pytest.fixture
def app_config(tmp_path, stub_encoder) -> AppConfig:
    return AppConfig(
        encoder_binary=str(stub_encoder),
        log_file=tmp_path / "conversion_log.txt",
    )


@pytest.fixture
def encoder_mode(monkeypatch):
    """Select the stub encoder behavior for the current test."""
    def _set(mode: str, exit_code: int = 0) -> None:
        monkeypatch.setenv("STUB_ENCODER_MODE", mode)
        monkeypatch.setenv("STUB_ENCODER_EXIT", str(exit_code))

    _set("ok")
    return _set
