"""Command-line entry point for the Seaport batch lister."""

import logging
import sys

from dotenv import load_dotenv

from .config import load_config
from .errors import ConfigurationError
from .listing_log import ListingLog
from .orchestrator import run_batch

logger = logging.getLogger(__name__)


def main() -> int:
    """Run one listing batch.

    Returns:
        int: 0 when the run completes, whatever the individual listing
        outcomes; 1 on a configuration error or any fatal error.

    """
    load_dotenv()

    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"ERROR: {e!s}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    listing_log = ListingLog(config.log_file)
    try:
        run_batch(config, listing_log=listing_log)
    except Exception as e:
        logger.exception("Unexpected error during listing run")
        print(f"An unexpected error occurred: {e!s}", file=sys.stderr)
        listing_log.append(f"FATAL ERROR: {e!s}")
        return 1
    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
