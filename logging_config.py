import logging
import sys

LOGGERS = ("main", "catalog", "locations", "search")


def setup_logging(level: str = "INFO"):
    """Send application logs to stdout with a timestamped format."""
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    for name in LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        logger.handlers.clear()
        logger.addHandler(handler)
