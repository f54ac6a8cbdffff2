"""Thin CLI entry point: plans a clip and calls the engine."""

import sys

from audioclip.engine import clip, plan_clip
from audioclip.ffutil import ExecutionError

USAGE = """\
Usage:
  clip <in.mp3> <start> <end> <out.mp3>
Examples:
  clip song.mp3 00:01:00 00:02:30 chorus.mp3
  clip song.mp3 60 150 chorus.mp3"""


def main(argv: list[str] | None = None) -> None:
    # Positionals only: file names may start with "-", so nothing is a flag.
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 4 or not all(args):
        print(USAGE)
        sys.exit(1)

    input_path, start, end, output = args

    def on_fallback(err: ExecutionError) -> None:
        print(f"Fast copy failed, retrying with re-encode... {err}", file=sys.stderr)

    try:
        plan = plan_clip(input_path, start, end, output)
        result = clip(plan, on_fallback=on_fallback)
    except (ValueError, ExecutionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    how = "re-encoded" if result.reencoded else "copied, no re-encode"
    print(f"✓ Wrote {result.output_path} ({how})")
