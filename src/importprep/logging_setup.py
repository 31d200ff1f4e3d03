"""Logging setup for the terminal client."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application.

    Textual owns the terminal while the app runs, so records go to
    ``importprep.log`` in the working directory instead of stderr.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        filename="importprep.log",
    )
