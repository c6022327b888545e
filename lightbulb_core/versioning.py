"""Runtime version resolution helpers for Lightbulb Core."""

from __future__ import annotations

import os

from lightbulb_core import __version__


def get_runtime_version(default: str = __version__) -> str:
    """Resolve runtime version from env with package fallback.

    Priority:
    1) ``LIGHTBULB_VERSION``
    2) ``BUILD_VERSION``
    3) ``lightbulb_core.__version__``
    """
    for key in ("LIGHTBULB_VERSION", "BUILD_VERSION"):
        value = str(os.environ.get(key, "") or "").strip()
        if value:
            return value

    return default
