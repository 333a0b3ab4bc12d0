"""Development entry point (no install needed).

Runs the CLI straight from a checkout:

    python main.py list milk

The code lives under `src/`, so the directory is put on `sys.path` first.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    # Windows terminals default to cp1252; item text may hold any character.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
