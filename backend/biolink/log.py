import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install the root handler used by create_app; SQL echo stays quiet."""
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(format=LOG_FORMAT, level=numeric_level, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
