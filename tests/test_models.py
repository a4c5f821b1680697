"""
Conversion Model Tests
======================
Tests for request validation, output path derivation and outcomes.
"""

import sys
from pathlib import Path
import pytest

from video_converter.encoding.models import (
    SUPPORTED_FORMATS,
    ConversionFailure,
    ConversionRequest,
    ConversionSuccess,
    derive_output_path,
    expand_user_path,
    normalize_format,
)
from video_converter.errors import (
    ErrorCode,
    InvocationError,
    MissingInputError,
    UnsupportedFormatError,
    ValidationError,
    has_invalid_chars,
)


class TestDeriveOutputPath:
    """Tests for derive_output_path."""

    def test_replaces_extension_in_same_directory(self):
        assert derive_output_path(Path("clip.mov"), "mp4") == Path("clip.mp4")

    def test_keeps_input_directory(self):
        result = derive_output_path(Path("/videos/trip/clip.mov"), "webm")
        assert result == Path("/videos/trip/clip.webm")

    def test_output_dir_override(self):
        result = derive_output_path(Path("/videos/clip.mov"), "mkv", output_dir=Path("/exports"))
        assert result == Path("/exports/clip.mkv")

    def test_output_name_sanitized(self):
        result = derive_output_path(Path("/videos/clip.mov"), "mp4", output_name="final: cut")
        assert result.name == "final_ cut.mp4"
        assert not has_invalid_chars(result.name)

    def test_output_name_with_extension_not_doubled(self):
        result = derive_output_path(Path("clip.mov"), "mp4", output_name="final.mp4")
        assert result.name == "final.mp4"

    def test_blank_output_name_falls_back_to_input_stem(self):
        result = derive_output_path(Path("clip.mov"), "avi", output_name="   ")
        assert result == Path("clip.avi")


class TestNormalizeFormat:
    """Tests for normalize_format."""

    @pytest.mark.parametrize("raw", ["mp4", " MP4 ", ".mp4", ".Mp4"])
    def test_variants(self, raw):
        assert normalize_format(raw) == "mp4"

    def test_none_is_empty(self):
        assert normalize_format(None) == ""


class TestConversionRequestCreate:
    """Tests for ConversionRequest.create validation."""

    def test_derived_request(self, tmp_path):
        source = tmp_path / "clip.mov"
        source.write_bytes(b"data")

        request = ConversionRequest.create(source, "mp4")

        assert request.input_path == source
        assert request.target_format == "mp4"
        assert request.output_path == tmp_path / "clip.mp4"

    def test_empty_input_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ConversionRequest.create("", "mp4")
        assert exc_info.value.code == ErrorCode.E002
        assert exc_info.value.message == "Please select a file first!"

    def test_missing_input_rejected(self, tmp_path):
        with pytest.raises(MissingInputError):
            ConversionRequest.create(tmp_path / "nope.mov", "mp4")

    def test_directory_input_rejected(self, tmp_path):
        with pytest.raises(MissingInputError):
            ConversionRequest.create(tmp_path, "mp4")

    def test_empty_format_rejected(self, tmp_path):
        source = tmp_path / "clip.mov"
        source.write_bytes(b"data")
        with pytest.raises(UnsupportedFormatError):
            ConversionRequest.create(source, "  ")

    def test_format_outside_allow_list_rejected(self, tmp_path):
        source = tmp_path / "clip.mov"
        source.write_bytes(b"data")
        with pytest.raises(UnsupportedFormatError):
            ConversionRequest.create(source, "flv", allowed_formats=SUPPORTED_FORMATS)

    def test_any_format_without_allow_list(self, tmp_path):
        source = tmp_path / "clip.mov"
        source.write_bytes(b"data")
        request = ConversionRequest.create(source, "flv")
        assert request.output_path.suffix == ".flv"

    def test_output_equal_to_input_rejected(self, tmp_path):
        source = tmp_path / "clip.mp4"
        source.write_bytes(b"data")
        with pytest.raises(ValidationError) as exc_info:
            ConversionRequest.create(source, "mp4")
        assert exc_info.value.code == ErrorCode.E004

    def test_caller_supplied_name_and_folder(self, tmp_path):
        source = tmp_path / "clip.mov"
        source.write_bytes(b"data")
        exports = tmp_path / "exports"

        request = ConversionRequest.create(source, "MKV", output_dir=exports, output_name="a|b")

        assert request.target_format == "mkv"
        assert request.output_path == exports / "a_b.mkv"


class TestUnknownHomeDirectory:
    """A ~user prefix for a user that does not exist."""

    UNKNOWN_USER_PATH = "~no_such_user_for_video_converter/clip.mov"

    @pytest.mark.skipif(sys.platform == "win32", reason="~user lookup differs on Windows")
    def test_expand_user_path_returns_none(self):
        assert expand_user_path(self.UNKNOWN_USER_PATH) is None

    def test_expand_user_path_plain_path(self, tmp_path):
        assert expand_user_path(tmp_path) == tmp_path

    @pytest.mark.skipif(sys.platform == "win32", reason="~user lookup differs on Windows")
    def test_input_is_reported_missing(self):
        with pytest.raises(MissingInputError) as exc_info:
            ConversionRequest.create(self.UNKNOWN_USER_PATH, "mp4")
        assert exc_info.value.file_path == Path(self.UNKNOWN_USER_PATH)

    @pytest.mark.skipif(sys.platform == "win32", reason="~user lookup differs on Windows")
    def test_output_folder_is_rejected(self, tmp_path):
        source = tmp_path / "clip.mov"
        source.write_bytes(b"data")
        with pytest.raises(ValidationError) as exc_info:
            ConversionRequest.create(source, "mp4", output_dir="~no_such_user_for_video_converter/exports")
        assert exc_info.value.code == ErrorCode.E004
        assert exc_info.value.message == "Output folder not found"


class TestOutcomes:
    """Tests for ConversionSuccess / ConversionFailure."""

    def test_success(self):
        outcome = ConversionSuccess(output_path=Path("clip.mp4"))
        assert outcome.succeeded
        assert outcome.raise_for_error() is outcome

    def test_failure_raises_wrapped_error(self):
        error = InvocationError("boom", exit_code=1)
        outcome = ConversionFailure(diagnostic="boom", error=error, exit_code=1)
        assert not outcome.succeeded
        with pytest.raises(InvocationError) as exc_info:
            outcome.raise_for_error()
        assert exc_info.value is error
