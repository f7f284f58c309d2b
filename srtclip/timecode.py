"""SubRip timestamp conversion (``HH:MM:SS,mmm`` <-> seconds)."""

import math
import re

_TIMESTAMP_RE = re.compile(r"^(\d+):(\d+):(\d+),(\d+)$")

# Absorbs float noise such as 3.3 - 1.1 == 2.1999999999999997 before truncating.
_MS_EPSILON = 1e-6


class FormatError(ValueError):
    """Raised when a timestamp cannot be parsed or formatted."""
    pass


def parse_timestamp(text: str) -> float:
    """Convert ``HH:MM:SS,mmm`` to seconds."""
    m = _TIMESTAMP_RE.match(text.strip())
    if m is None:
        raise FormatError(f"Invalid timestamp {text!r}, expected HH:MM:SS,mmm")
    hours, minutes, seconds, millis = (int(g) for g in m.groups())
    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def format_timestamp(seconds: float) -> str:
    """Convert seconds to ``HH:MM:SS,mmm``, truncating below one millisecond."""
    if not math.isfinite(seconds) or seconds < 0:
        raise FormatError(f"Cannot format {seconds!r} as a timestamp")

    total_ms = math.floor(seconds * 1000 + _MS_EPSILON)
    total_s, ms = divmod(total_ms, 1000)
    h, rem = divmod(total_s, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"
