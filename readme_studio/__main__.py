"""
Launch the Streamlit app: ``python -m readme_studio`` or ``readme-studio``.

Extra arguments are passed through to ``streamlit run``.
"""
import subprocess
import sys
from pathlib import Path

_GUI = Path(__file__).parent / "gui.py"


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    cmd = [sys.executable, "-m", "streamlit", "run", str(_GUI), *argv]
    return subprocess.call(cmd)


if __name__ == "__main__":
    sys.exit(main())
