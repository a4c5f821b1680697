"""
Application Module
==================
Core application controller and business logic.

Key Components:
    - AppController: Central business logic coordinator
    - AppConfig: Application configuration
    - ConversionJob: Background conversion handle
"""

from .config import AppConfig
from .controller import AppController, ConversionCallbacks, ConversionJob
from .events import (
    AppEvent,
    EventType,
    JobState,
    LogEvent,
    StateEvent,
)

__all__ = [
    "AppConfig",
    "AppController",
    "ConversionJob",
    "ConversionCallbacks",
    "AppEvent",
    "EventType",
    "JobState",
    "LogEvent",
    "StateEvent",
]
