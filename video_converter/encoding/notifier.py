"""
Conversion Notifier
===================
Success-only completion signal raised by the encoder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

ConversionListener = Callable[[Path], None]


class ConversionNotifier:
    """
    Completion signal raised by the encoder after a successful conversion.

    Listeners are called synchronously, on the thread that ran the
    conversion, with the output path. Failures never reach listeners.
    """

    def __init__(self) -> None:
        self._listeners: list[ConversionListener] = []

    def subscribe(self, listener: ConversionListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ConversionListener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self, output_path: Path) -> None:
        # Copy so a listener may unsubscribe itself while being called.
        for listener in list(self._listeners):
            listener(output_path)
