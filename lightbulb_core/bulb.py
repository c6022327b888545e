"""
Bulb State -- a single on/off flag guarded by one lock.

The check-and-set of every transition runs under ``self._lock``. A
transition callback (the activity log writer) is invoked while the lock
is still held, so log order always matches transition order.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TransitionCallback = Callable[[bool], None]


class LightbulbError(Exception):
    """Base class for lightbulb domain errors."""


class AlreadyOnError(LightbulbError):
    def __init__(self, message: str = "The lightbulb is already on"):
        super().__init__(message)


class AlreadyOffError(LightbulbError):
    def __init__(self, message: str = "The lightbulb is already off"):
        super().__init__(message)


class BulbState:
    """In-memory bulb. Starts off; nothing survives a restart."""

    def __init__(self, is_on: bool = False):
        self._is_on = bool(is_on)
        self._lock = threading.Lock()

    def get_status(self) -> bool:
        with self._lock:
            return self._is_on

    def turn_on(self, on_transition: Optional[TransitionCallback] = None) -> None:
        self._set(True, on_transition)

    def turn_off(self, on_transition: Optional[TransitionCallback] = None) -> None:
        self._set(False, on_transition)

    def _set(self, target: bool, on_transition: Optional[TransitionCallback]) -> None:
        with self._lock:
            if self._is_on == target:
                raise AlreadyOnError() if target else AlreadyOffError()
            self._is_on = target
            logger.info("Lightbulb state changed to %s", "ON" if target else "OFF")
            # A failing callback leaves the new state in place.
            if on_transition is not None:
                on_transition(target)
