"""Main module for goat."""

import logging
import sys

from goat.cli import run
from goat.config import get_paths, log_level_name


def setup_logging() -> None:
    """Configure logging to file for debugging."""
    paths = get_paths()
    paths.ensure_global_dirs()
    log_file = paths.debug_log

    level = log_level_name()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("goat starting, logging to %s", log_file)


def main() -> None:
    """Entry point for goat."""
    sys.exit(run(sys.argv[1:], configure_logging=setup_logging))


if __name__ == "__main__":
    main()
