# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

from pixeldiff.cli.compare_cli import app


def main() -> None:
    """Run the command line interface."""
    app()


if __name__ == "__main__":
    main()
