"""
Encoding Module
===============
Conversion requests, outcomes and the FFmpeg-backed encoder.
"""

from .encoder import VideoEncoder
from .notifier import ConversionNotifier
from .models import (
    SUPPORTED_FORMATS,
    ConversionFailure,
    ConversionOutcome,
    ConversionRequest,
    ConversionSuccess,
    derive_output_path,
    normalize_format,
)

__all__ = [
    "VideoEncoder",
    "ConversionNotifier",
    "SUPPORTED_FORMATS",
    "ConversionRequest",
    "ConversionSuccess",
    "ConversionFailure",
    "ConversionOutcome",
    "derive_output_path",
    "normalize_format",
]
