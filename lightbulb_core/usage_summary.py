"""Plain-text usage summary built from activity log lines."""

from __future__ import annotations

from typing import List, Optional

from lightbulb_core.activity_log import LogEntry

RECENT_ACTIONS = 5

NO_ACTIVITY = "Lightbulb Usage Summary:\n\nNo activity recorded yet."
LOG_MISSING = "Lightbulb Usage Summary:\n\nLog file not found. No activity recorded yet."


def _percent(part: int, total: int) -> float:
    return (part / total) * 100.0 if total else 0.0


def _timestamp(line: str) -> str:
    entry = LogEntry.parse(line)
    return entry.timestamp if entry else "N/A"


def build_usage_summary(log_content: Optional[str], is_on: bool) -> str:
    """Summarise ``log_content``; ``None`` means the log could not be read."""
    if log_content is None:
        return LOG_MISSING

    lines: List[str] = [line for line in log_content.splitlines() if line.strip()]
    if not lines:
        return NO_ACTIVITY

    total = len(lines)
    on_actions = sum(1 for line in lines if "turned ON" in line)
    off_actions = sum(1 for line in lines if "turned OFF" in line)
    recent = "\n".join(f"  {line}" for line in lines[-RECENT_ACTIONS:])

    return (
        "Lightbulb Usage Summary:\n\n"
        f"Current Status: {'ON' if is_on else 'OFF'}\n"
        f"Total Actions: {total}\n"
        f"- Turn ON actions: {on_actions} ({_percent(on_actions, total):.1f}%)\n"
        f"- Turn OFF actions: {off_actions} ({_percent(off_actions, total):.1f}%)\n\n"
        "Activity Period:\n"
        f"- First action: {_timestamp(lines[0])}\n"
        f"- Last action: {_timestamp(lines[-1])}\n\n"
        f"Recent Activity (last {RECENT_ACTIONS} actions):\n"
        f"{recent}"
    )
