#!/usr/bin/env python3
"""Generate a synthetic MP3 for audioclip testing.

Produces a ~12-second stereo file with one tone per segment:
  0-3s   440 Hz
  3-6s   660 Hz
  6-9s   880 Hz
  9-12s  440 Hz
"""

import subprocess
import sys
from pathlib import Path


def generate_test_audio(output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)

    audio_filter = (
        "sine=f=440:d=3[a0];"
        "sine=f=660:d=3[a1];"
        "sine=f=880:d=3[a2];"
        "sine=f=440:d=3[a3];"
        "[a0][a1][a2][a3]concat=n=4:v=0:a=1,aformat=channel_layouts=stereo[aout]"
    )

    cmd = [
        "ffmpeg", "-y",
        "-filter_complex", audio_filter,
        "-map", "[aout]",
        "-ar", "44100",
        "-c:a", "libmp3lame",
        "-b:a", "128k",
        str(output),
    ]
    subprocess.run(cmd, check=True, capture_output=True)
    print(f"Generated: {output}")


if __name__ == "__main__":
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("tests/fixtures/synthetic.mp3")
    generate_test_audio(out)
