from __future__ import annotations
import sys
from docpad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m docpad.main` or the `docpad` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
