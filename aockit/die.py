"""Print a formatted message to standard error and exit."""

from __future__ import annotations

import sys
from typing import NoReturn


def die(status: int, fmt: str, *args: object) -> NoReturn:
    """Write ``fmt % args`` to stderr and exit with ``status``."""
    sys.stderr.write(fmt % args)
    sys.stderr.flush()
    raise SystemExit(status)