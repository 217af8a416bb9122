import logging
import sys

from maritime_geo.core.settings import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for applications embedding the library."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stdout,
    )
