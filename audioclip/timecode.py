"""Time argument parsing and ffmpeg timestamp formatting."""

import math
import re

_PLAIN_SECONDS = re.compile(r"^\d+(\.\d+)?$")


class FormatError(ValueError):
    """Raised when a time argument contains a non-numeric field."""
    pass


def parse_time_arg(text: str) -> float:
    """Convert ``"90"``, ``"1:30"`` or ``"00:01:30.5"`` into seconds.

    Colon-separated fields are most significant first and folded base 60, so
    any number of fields is accepted. Only the plain digits-and-dot form is
    valid for each field.
    """
    if _PLAIN_SECONDS.match(text):
        total = float(text)
    else:
        fields = text.split(":")
        if not all(_PLAIN_SECONDS.match(f) for f in fields):
            raise FormatError(f"Bad time format: {text!r}")

        total = 0.0
        for f in fields:
            total = total * 60 + float(f)

    if not math.isfinite(total):
        raise FormatError(f"Time out of range: {text[:20]!r}...")
    return total


def format_hms(seconds: float) -> str:
    """Render seconds as ``HH:MM:SS.mmm`` for ffmpeg's -ss / -t.

    The value is rounded to whole milliseconds before it is split, so the
    seconds field never reads 60.
    """
    total_ms = round(seconds * 1000)
    h, rest = divmod(total_ms, 3_600_000)
    m, rest = divmod(rest, 60_000)
    s, ms = divmod(rest, 1000)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"
