"""FFmpeg subprocess helpers."""

import subprocess
from pathlib import Path

from audioclip.config import ReencodeConfig
from audioclip.models import Invocation, RunResult


class ExecutionError(RuntimeError):
    """Raised when a command fails to launch or exits non-zero.

    The message is the command's stderr when it wrote any, otherwise a
    description of the failure.
    """

    def __init__(self, message: str, stderr: str = "", returncode: int | None = None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


def run(cmd: str, args: list[str] | tuple[str, ...]) -> RunResult:
    """Run *cmd* with *args*, capturing output, and wait for it to exit."""
    argv = [cmd, *args]
    try:
        # ffmpeg echoes tag metadata, which may not be UTF-8
        result = subprocess.run(
            argv, capture_output=True, text=True, errors="replace"
        )
    except OSError as exc:
        raise ExecutionError(str(exc)) from exc

    if result.returncode != 0:
        stderr = result.stderr or ""
        message = stderr or f"Command failed: {' '.join(argv)}"
        raise ExecutionError(message, stderr=stderr, returncode=result.returncode)

    return RunResult(stdout=result.stdout or "", stderr=result.stderr or "")


def run_invocation(invocation: Invocation) -> RunResult:
    return run(invocation.cmd, invocation.args)


def _seek_args(start: str, duration: str, input_path: str | Path) -> list[str]:
    return [
        "-ss", start,
        "-t", duration,
        "-i", str(input_path),
    ]


def copy_args(
    start: str, duration: str, input_path: str | Path, output_path: Path
) -> tuple[str, ...]:
    """Seek and cut without re-encoding (stream copy)."""
    return (
        *_seek_args(start, duration, input_path),
        "-c", "copy",
        "-y", str(output_path),
    )


def reencode_args(
    start: str,
    duration: str,
    input_path: str | Path,
    output_path: Path,
    reencode: ReencodeConfig | None = None,
) -> tuple[str, ...]:
    """Seek and cut, dropping video and transcoding audio at fixed parameters."""
    reencode = reencode or ReencodeConfig()
    return (
        *_seek_args(start, duration, input_path),
        "-vn",
        "-ar", str(reencode.sample_rate),
        "-ac", str(reencode.channels),
        "-b:a", reencode.bitrate,
        "-y", str(output_path),
    )
