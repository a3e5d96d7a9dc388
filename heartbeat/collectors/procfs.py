"""Readers for the kernel pseudo-files backing each metric.

Every reader resolves its own failure to the field default: a missing file,
a permission error, undecodable bytes or unparsable content never raises to
the caller.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from heartbeat.config import HOSTNAME_PATH, LOADAVG_PATH, MEMINFO_PATH, UPTIME_PATH
from heartbeat.models.metrics import DEFAULT_HOSTNAME, DEFAULT_LOAD

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1


def _read_text(path: str | Path) -> str | None:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Cannot read source: %s", path)
        return None


def _first_token(text: str | None) -> str | None:
    if not text:
        return None
    tokens = text.split()
    return tokens[0] if tokens else None


def resolve_hostname(path: str | Path = HOSTNAME_PATH) -> str:
    """Return the machine name with surrounding whitespace stripped."""
    text = _read_text(path)
    if text is None:
        return DEFAULT_HOSTNAME
    return text.strip() or DEFAULT_HOSTNAME


def read_uptime(path: str | Path = UPTIME_PATH) -> int:
    """Seconds since boot, truncated toward zero."""
    token = _first_token(_read_text(path))
    if token is None:
        return 0
    try:
        seconds = float(token)
    except ValueError:
        logger.debug("Unparsable uptime token %r in %s", token, path)
        return 0
    if not math.isfinite(seconds) or seconds < 0:
        return 0
    return int(seconds)


def read_meminfo(key: str, path: str | Path = MEMINFO_PATH) -> int:
    """Value in kB of the first line whose label starts with ``key``.

    The source is re-read on every call.
    """
    text = _read_text(path)
    if text is None:
        return 0

    for line in text.splitlines():
        if not line.startswith(key):
            continue
        parts = line.split()
        if len(parts) < 2:
            return 0
        value = parts[1]
        # ascii digits only: int() would also take signs, underscores and
        # non-latin digits
        if not (value.isascii() and value.isdigit()):
            logger.debug("Unparsable %s value %r in %s", key, value, path)
            return 0
        kb = int(value)
        if kb > U64_MAX:
            logger.debug("Out of range %s value %r in %s", key, value, path)
            return 0
        return kb

    return 0


def read_loadavg(path: str | Path = LOADAVG_PATH) -> str:
    """The 1-minute load average exactly as the kernel formats it."""
    return _first_token(_read_text(path)) or DEFAULT_LOAD
