"""Run ado-endpoint-tester from a checkout, without `pip install -e .`.

    python -m main run                      # interactive PAT / Azure CLI run
    python -m main run --skip-network-check
    python -m main doctor env               # AZURE_DEVOPS_* report only

The packages live under `src/`, so the directory is put on `sys.path`
before the Typer app is imported.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
