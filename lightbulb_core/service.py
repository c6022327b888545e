"""
Lightbulb Service -- tool handlers and resource readers.

Transport-agnostic. Both the stdio server and the Flask blueprint hold a
reference to one ``LightbulbService`` built at startup.

Handlers return a result string on success and raise a
``LightbulbError`` (or ``ActivityLogError`` wrapped as
``TransitionLogError``) on failure; adapters turn those into MCP
tool-error results.
"""

from __future__ import annotations

import logging
from typing import Optional

from lightbulb_core.activity_log import (
    ACTION_OFF,
    ACTION_ON,
    ActivityLog,
    ActivityLogError,
    FileActivityLog,
    InMemoryActivityLog,
)
from lightbulb_core.bulb import BulbState, LightbulbError
from lightbulb_core.usage_summary import build_usage_summary

logger = logging.getLogger(__name__)

LIGHTBULB_ON_STATUS = "The lightbulb is on"
LIGHTBULB_OFF_STATUS = "The lightbulb is off"
LIGHTBULB_TURNED_ON = "Lightbulb turned on successfully"
LIGHTBULB_TURNED_OFF = "Lightbulb turned off successfully"

LOG_EMPTY = "No lightbulb activity recorded yet."
LOG_MISSING = "Lightbulb log file not found. No activity recorded yet."


class TransitionLogError(LightbulbError):
    """State changed but the activity log write failed. Not rolled back."""


class LightbulbService:
    """Owns the bulb and the activity log sink."""

    def __init__(self, activity_log: ActivityLog, bulb: Optional[BulbState] = None):
        self.activity_log = activity_log
        self.bulb = bulb or BulbState()

    @classmethod
    def with_file_log(cls, path: str) -> "LightbulbService":
        return cls(FileActivityLog(path))

    @classmethod
    def in_memory(cls) -> "LightbulbService":
        return cls(InMemoryActivityLog())

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def get_lightbulb_status(self) -> str:
        return LIGHTBULB_ON_STATUS if self.bulb.get_status() else LIGHTBULB_OFF_STATUS

    def turn_on_lightbulb(self) -> str:
        self.bulb.turn_on(self._log_transition)
        return LIGHTBULB_TURNED_ON

    def turn_off_lightbulb(self) -> str:
        self.bulb.turn_off(self._log_transition)
        return LIGHTBULB_TURNED_OFF

    def _log_transition(self, is_on: bool) -> None:
        try:
            self.activity_log.append(ACTION_ON if is_on else ACTION_OFF)
        except ActivityLogError as exc:
            raise TransitionLogError(f"Failed to log event: {exc}") from exc

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def _read_log(self) -> Optional[str]:
        try:
            return self.activity_log.read()
        except ActivityLogError as exc:
            logger.debug("Activity log unreadable: %s", exc)
            return None

    def read_activity_log(self) -> str:
        content = self._read_log()
        if content is None:
            return LOG_MISSING
        if not content.strip():
            return LOG_EMPTY
        return f"Lightbulb Activity Log:\n\n{content}"

    def usage_summary(self) -> str:
        return build_usage_summary(self._read_log(), self.bulb.get_status())
