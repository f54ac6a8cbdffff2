"""Shared test fixtures."""

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run from an empty directory that already has an output/ folder."""
    (tmp_path / "output").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def synthetic_mp3(tmp_path: Path) -> Path:
    if shutil.which("ffmpeg") is None:
        pytest.skip("ffmpeg not on PATH")
    out = tmp_path / "synthetic.mp3"
    subprocess.run(
        [sys.executable, str(SCRIPTS_DIR / "generate_test_audio.py"), str(out)],
        check=True,
        capture_output=True,
    )
    return out


@pytest.fixture
def fake_ffmpeg(tmp_path: Path):
    """Factory for an ``ffmpeg`` stand-in that prints a latin-1 tag line.

    ID3v1 tags are often latin-1 and ffmpeg echoes them to stderr verbatim.
    """
    def make(exit_code: int = 0) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / "ffmpeg"
        script.write_text(
            f"#!{sys.executable}\n"
            "import sys\n"
            "sys.stderr.buffer.write(b\"    title : Caf\\xe9\\n\")\n"
            f"sys.exit({exit_code})\n"
        )
        script.chmod(0o755)
        return script
    return make
