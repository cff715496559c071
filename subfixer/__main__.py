"""Module entrypoint for running subfixer as ``python -m subfixer``."""

from __future__ import annotations

from subfixer.cli import main


if __name__ == "__main__":
    main()
