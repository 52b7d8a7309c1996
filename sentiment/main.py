"""Console entry point."""
import logging

import config
from sentiment.console import ConsoleApp
from sentiment.services import Storage

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("sentiment")


def main() -> None:
    app = ConsoleApp(Storage.create())
    logger.debug("Stores ready (capacity %d)", config.MAX_RECORDS)
    try:
        app.run()
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info("Input closed, exiting")


if __name__ == "__main__":
    main()
