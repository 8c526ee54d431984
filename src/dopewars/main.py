"""Entry-point for launching the CLI application."""
from __future__ import annotations

import logging
import os

from .presentation.cli.app import main as cli_main


def configure_logging() -> None:
    level_name = os.getenv("DOPEWARS_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main() -> None:
    """Run the CLI presentation layer."""
    configure_logging()
    cli_main()


if __name__ == "__main__":
    main()
