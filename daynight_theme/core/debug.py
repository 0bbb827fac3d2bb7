"""Debug utilities for conditional printing."""

import os
import sys


def _is_debug_mode() -> bool:
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG_MODE", "false").lower() == "true"


def debug_print(*args: object, **kwargs: object) -> None:
    """Print diagnostics to stderr only if DEBUG_MODE is enabled.

    stdout is reserved for the chosen theme identifier.
    """
    if _is_debug_mode():
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)  # type: ignore[call-overload]
