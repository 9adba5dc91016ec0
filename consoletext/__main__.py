"""Module entrypoint for running consoletext as ``python -m consoletext``."""

from __future__ import annotations

from consoletext.cli import main


if __name__ == "__main__":
    main()
