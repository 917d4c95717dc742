"""
Settings and configuration for redaadic.

Values are read from the environment at import time.
"""

import os
from typing import Optional


def _int_or_none(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


# Maximum rule chain length used by the CLI; unset means unbounded
MAX_DEPTH = _int_or_none(os.environ.get("REDAADIC_MAX_DEPTH"))

# Debug mode
DEBUG = os.environ.get("REDAADIC_DEBUG", "").lower() in ("1", "true", "yes")

# Timeout in seconds for dictionary index and archive downloads
DOWNLOAD_TIMEOUT = float(os.environ.get("REDAADIC_DOWNLOAD_TIMEOUT", "60"))
