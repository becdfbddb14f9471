"""`python -m main` from inside `src/`: same commands as `ado-endpoint-tester`."""

from __future__ import annotations

import sys

# Status lines use emoji; Windows consoles default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
