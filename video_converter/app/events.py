"""
Conversion Job Events
=====================
Events the controller emits while a background conversion runs.

State events identify the job and carry the paths it converts between, so
a listener can report progress without holding on to the job handle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from video_converter.encoding.models import ConversionRequest


LOG_LEVELS = ("debug", "info", "success", "warning", "error")


class EventType(str, Enum):
    LOG = "log"
    STATE = "state"


class JobState(str, Enum):
    """Lifecycle of a conversion job. There is no cancelled state."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_finished(self) -> bool:
        return self in (JobState.COMPLETED, JobState.FAILED)


@dataclass(frozen=True)
class LogEvent:
    """Free-form message for the log pane."""

    level: str
    message: str
    job_id: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)
    event_type: EventType = field(default=EventType.LOG, init=False)


@dataclass(frozen=True)
class StateEvent:
    """A job moved to a new state."""

    job_id: str
    state: JobState
    input_path: Path
    output_path: Path
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    event_type: EventType = field(default=EventType.STATE, init=False)


AppEvent = Union[LogEvent, StateEvent]


def log_event(message: str, level: str = "info", job_id: Optional[str] = None) -> LogEvent:
    """Create a log event; unknown levels are reported as 'info'."""
    level = level.lower()
    if level not in LOG_LEVELS:
        level = "info"
    return LogEvent(level=level, message=message, job_id=job_id)


def state_event(
    job_id: str,
    state: JobState,
    request: ConversionRequest,
    message: str = "",
) -> StateEvent:
    return StateEvent(
        job_id=job_id,
        state=state,
        input_path=request.input_path,
        output_path=request.output_path,
        message=message,
    )
