"""
Storage Module
==============
Append-only activity log of completed conversions.
"""

from .activity_log import DEFAULT_LOG_FILE, ActivityLogger, LogEntry

__all__ = ["ActivityLogger", "LogEntry", "DEFAULT_LOG_FILE"]
