# agro/infrastructure/log.py
#
# Shared API logger with elapsed time since process start.
#
#   - One log() function for services and startup code.
#   - Plain stdout with flush so container logs show lines immediately.
#   - API_LOG_ENABLED=false silences it (read per call, so tests can toggle it).
#   - Callers pass CPF values only in masked form (CPF.mascarado).
from __future__ import annotations

import sys
import time

from .config import get_settings

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    if not get_settings().log_enabled:
        return
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[agro {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
