"""Entry point for the restaurant ordering console."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from restaurant.config import DEFAULT_LOG_LEVEL
from restaurant.session import Session

logger = logging.getLogger(__name__)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send diagnostic logs to stderr so they never mix with the prompts."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    """Run one interactive session."""
    parser = argparse.ArgumentParser(prog="restaurant", description="Restaurant ordering console.")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="diagnostic log level written to stderr (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    session = Session()
    try:
        session.run()
    except EOFError:
        # Input closed mid-session; end without a traceback.
        logger.debug("session_aborted reason=eof")
        session.console.print()


if __name__ == "__main__":
    main()
