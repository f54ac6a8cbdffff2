"""Orchestrator: plans a clip and runs the copy-then-reencode attempts."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from audioclip import ffutil
from audioclip.config import ClipConfig
from audioclip.ffutil import ExecutionError
from audioclip.models import Invocation, TimeRange
from audioclip.timecode import format_hms, parse_time_arg


class ValidationError(ValueError):
    """Raised when the requested range is empty or reversed."""
    pass


@dataclass(frozen=True)
class ClipPlan:
    """Everything needed to run both attempts, computed once up front."""

    output_path: Path
    copy: Invocation
    reencode: Invocation


@dataclass
class ClipResult:
    output_path: Path
    reencoded: bool = False


def plan_clip(
    input_path: str,
    start_arg: str,
    end_arg: str,
    output_name: str,
    config: ClipConfig | None = None,
) -> ClipPlan:
    """Parse the time markers and build both ffmpeg invocations.

    Raises:
        FormatError: a marker is not a number or timestamp.
        ValidationError: end is not after start.
    """
    config = config or ClipConfig()

    span = TimeRange(start=parse_time_arg(start_arg), end=parse_time_arg(end_arg))
    if span.end <= span.start:
        raise ValidationError("end must be greater than start")

    output_path = config.output_path(output_name)
    start = format_hms(span.start)
    duration = format_hms(span.duration)

    return ClipPlan(
        output_path=output_path,
        copy=Invocation(
            config.ffmpeg,
            ffutil.copy_args(start, duration, input_path, output_path),
        ),
        reencode=Invocation(
            config.ffmpeg,
            ffutil.reencode_args(
                start, duration, input_path, output_path, config.reencode
            ),
        ),
    )


def clip(
    plan: ClipPlan,
    on_fallback: Callable[[ExecutionError], None] | None = None,
) -> ClipResult:
    """Try a stream copy first; if ffmpeg rejects it, re-encode once.

    A failed copy is reported through *on_fallback* and never raised. A failed
    re-encode raises ``ExecutionError``. Whatever the copy attempt wrote to the
    output path is left for the re-encode to overwrite.
    """
    copy_error: ExecutionError | None = None
    try:
        ffutil.run_invocation(plan.copy)
    except ExecutionError as e:
        copy_error = e

    if copy_error is None:
        return ClipResult(output_path=plan.output_path)

    if on_fallback:
        on_fallback(copy_error)

    ffutil.run_invocation(plan.reencode)
    return ClipResult(output_path=plan.output_path, reencoded=True)
