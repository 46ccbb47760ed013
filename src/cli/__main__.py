"""Run ``python -m cli``; the exit status is the one main() returns."""

from __future__ import annotations

from cli.main import main


if __name__ == "__main__":
    raise SystemExit(main())
