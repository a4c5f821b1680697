"""
Application Controller
======================
Central controller for video converter business logic.

Keeps validation, encoder invocation and activity logging out of the
presentation layer so they can be tested without a terminal.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from video_converter.app.config import AppConfig
from video_converter.app.events import (
    AppEvent,
    JobState,
    log_event,
    state_event,
)
from video_converter.encoding.encoder import VideoEncoder
from video_converter.encoding.models import ConversionOutcome, ConversionRequest
from video_converter.encoding.notifier import ConversionNotifier
from video_converter.storage.activity_log import ActivityLogger

logger = logging.getLogger(__name__)


@dataclass
class ConversionJob:
    """
    Handle for a background conversion.

    There is no cancellation: a started job runs until the encoder exits.
    """
    id: str
    request: ConversionRequest
    status: JobState
    outcome: Optional[ConversionOutcome] = None
    _thread: Optional[threading.Thread] = field(default=None, repr=False)

    def is_active(self) -> bool:
        """Check if job is currently running."""
        return self.status == JobState.RUNNING

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for job to complete.

        Args:
            timeout: Maximum time to wait (None = forever)

        Returns:
            True if job completed, False if timeout
        """
        if self._thread is None:
            return True

        self._thread.join(timeout=timeout)
        return not self._thread.is_alive()


@dataclass
class ConversionCallbacks:
    """Callbacks for conversion updates, called from the worker thread."""
    on_log: Optional[Callable[[str, str], None]] = None
    on_complete: Optional[Callable[[ConversionOutcome], None]] = None
    on_error: Optional[Callable[[str], None]] = None
    on_event: Optional[Callable[[AppEvent], None]] = None


class AppController:
    """
    Central controller for the video converter.

    Responsibilities:
        - Turning user selections into a validated ConversionRequest
        - Running the encoder, synchronously or on a worker thread
        - Appending successful conversions to the activity log

    Example:
        controller = AppController()
        controller.notifier.subscribe(lambda path: print(f"done: {path}"))

        job = controller.start_conversion(
            input_path=Path("clip.mov"),
            target_format="mp4",
            callbacks=ConversionCallbacks(on_complete=show_outcome),
        )
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        encoder: Optional[VideoEncoder] = None,
        activity_log: Optional[ActivityLogger] = None,
    ):
        """
        Initialize the application controller.

        Args:
            config: Application configuration
            encoder: Video encoder (creates an FFmpeg encoder if None)
            activity_log: Activity logger (writes to config.log_file if None)
        """
        self.config = config or AppConfig()
        self.encoder = encoder or VideoEncoder(
            self.config.encoder_binary,
            notifier=ConversionNotifier(),
        )
        self.activity_log = activity_log or ActivityLogger(self.config.log_file)

        self._jobs: list[ConversionJob] = []
        self._jobs_lock = threading.Lock()

    @property
    def notifier(self) -> ConversionNotifier:
        """Success signal shared with the encoder."""
        return self.encoder.notifier

    @property
    def supported_formats(self) -> tuple:
        return self.config.supported_formats

    def encoder_available(self) -> bool:
        return self.encoder.is_available()

    # ==================== Conversion ====================

    def build_request(
        self,
        input_path: Union[Path, str, None],
        target_format: str,
        output_dir: Union[Path, str, None] = None,
        output_name: Optional[str] = None,
    ) -> ConversionRequest:
        """
        Validate user selections.

        Raises:
            ValidationError: Missing input, unsupported format or bad output
        """
        return ConversionRequest.create(
            input_path,
            target_format,
            output_dir=output_dir or self.config.output_dir,
            output_name=output_name,
            allowed_formats=self.config.supported_formats if self.config.restrict_formats else None,
        )

    def convert(self, request: ConversionRequest) -> ConversionOutcome:
        """
        Run one conversion on the calling thread.

        Encoder failures are returned as a ConversionFailure, never raised.
        Successful conversions are appended to the activity log.
        """
        outcome = self.encoder.convert(request)
        if outcome.succeeded:
            self.activity_log.log(request.input_path, outcome.output_path, request.target_format)
        return outcome

    def start_conversion(
        self,
        input_path: Union[Path, str, None],
        target_format: str,
        output_dir: Union[Path, str, None] = None,
        output_name: Optional[str] = None,
        callbacks: Optional[ConversionCallbacks] = None,
    ) -> ConversionJob:
        """
        Start a conversion on a background thread.

        Validation happens before the thread starts. Jobs are not
        coordinated: two jobs may target the same output path.

        Args:
            input_path: Source video
            target_format: Container format token (e.g. 'mp4')
            output_dir: Optional output folder
            output_name: Optional output base name
            callbacks: Optional update callbacks

        Returns:
            ConversionJob handle

        Raises:
            ValidationError: If the selections are incomplete or invalid
        """
        request = self.build_request(input_path, target_format, output_dir, output_name)

        job = ConversionJob(
            id=f"conv_{uuid.uuid4().hex[:8]}",
            request=request,
            status=JobState.PENDING,
        )
        with self._jobs_lock:
            self._jobs.append(job)

        thread = threading.Thread(
            target=self._run_conversion,
            args=(job, callbacks),
            daemon=True,
        )
        job._thread = thread
        job.status = JobState.RUNNING
        self._emit(callbacks, state_event(job.id, JobState.RUNNING, request, f"converting to {request.target_format}"))
        thread.start()

        return job

    def _run_conversion(self, job: ConversionJob, callbacks: Optional[ConversionCallbacks]):
        """
        Internal method to run a conversion in the background thread.
        """
        request = job.request
        self._log(callbacks, f"{request.input_path.name} -> {request.output_path}", "info", job.id)

        try:
            outcome = self.convert(request)
        except Exception as e:
            # Listener or activity-log bugs must still finish the job.
            logger.exception("Conversion job %s crashed", job.id)
            job.status = JobState.FAILED
            if callbacks and callbacks.on_error:
                callbacks.on_error(str(e))
            self._emit(callbacks, state_event(job.id, JobState.FAILED, request, str(e)))
            return

        job.outcome = outcome
        if outcome.succeeded:
            job.status = JobState.COMPLETED
            self._log(callbacks, f"wrote {outcome.output_path}", "success", job.id)
            self._emit(callbacks, state_event(job.id, JobState.COMPLETED, request, "conversion completed"))
        else:
            job.status = JobState.FAILED
            if callbacks and callbacks.on_error:
                callbacks.on_error(outcome.diagnostic)
            self._emit(callbacks, state_event(job.id, JobState.FAILED, request, str(outcome.error)))

        if callbacks and callbacks.on_complete:
            callbacks.on_complete(outcome)

    @staticmethod
    def _emit(callbacks: Optional[ConversionCallbacks], event: AppEvent) -> None:
        if callbacks and callbacks.on_event:
            callbacks.on_event(event)

    def _log(
        self,
        callbacks: Optional[ConversionCallbacks],
        message: str,
        level: str,
        job_id: Optional[str] = None,
    ) -> None:
        if callbacks and callbacks.on_log:
            callbacks.on_log(message, level)
        self._emit(callbacks, log_event(message, level=level, job_id=job_id))

    def get_jobs(self) -> list[ConversionJob]:
        """
        Get jobs started in this session.

        Returns:
            Jobs, newest first
        """
        with self._jobs_lock:
            return list(reversed(self._jobs))

    def get_active_jobs(self) -> list[ConversionJob]:
        return [job for job in self.get_jobs() if job.is_active()]

    # ==================== Cleanup ====================

    def cleanup(self):
        """
        Clean up resources.

        Call this when shutting down the application. Running encoder
        processes are left to finish.
        """
        self.notifier.clear()
