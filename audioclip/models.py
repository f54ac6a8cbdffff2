"""Shared data types used across audioclip."""

from dataclasses import dataclass


@dataclass
class TimeRange:
    """A start/end time pair in seconds."""

    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Invocation:
    """A command name plus its ordered argument vector."""

    cmd: str
    args: tuple[str, ...]


@dataclass
class RunResult:
    """Captured output of a command that exited cleanly."""

    stdout: str
    stderr: str
