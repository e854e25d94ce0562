"""Supports `python -m height_cli`."""

from height_cli.cli import main

if __name__ == "__main__":
    main()
