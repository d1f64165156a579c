# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the task file, then runs the
console loop. Storage failures are fatal: a diagnostic goes to stderr and the
process exits with status 1.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_file import StorageError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    try:
        setup_logging(log_dir=settings.data_dir, console_level=console_level)
    except OSError as e:
        print(f"Could not set up logging in {settings.data_dir}: {e}", file=sys.stderr)
        return 1

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
        return run_console_loop(state)
    except StorageError as e:
        logger.debug("Storage failure.", exc_info=True)
        print(f"Fatal: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting.")
        print(file=sys.stderr)
        return 130
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    sys.exit(main())
