"""Fixed settings for a clip run."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ReencodeConfig:
    """Audio parameters for the transcoding fallback."""

    sample_rate: int = 44100
    channels: int = 2
    bitrate: str = "192k"


@dataclass
class ClipConfig:
    """Top-level clip settings."""

    ffmpeg: str = "ffmpeg"
    output_dir: Path = Path("output")
    reencode: ReencodeConfig = field(default_factory=ReencodeConfig)

    def output_path(self, name: str | Path) -> Path:
        """Join *name* onto the output directory and make it absolute.

        The directory itself is not created.
        """
        return (self.output_dir / name).resolve()
