# utils/logger.py
import logging
import os

_FMT = "[%(levelname)s] %(asctime)s %(name)s: %(message)s"

logger = logging.getLogger("orgchart")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FMT))
    logger.addHandler(handler)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())


def get_logger(name: str) -> logging.Logger:
    """Child of the app logger, e.g. get_logger("builder") -> orgchart.builder."""
    return logger.getChild(name)
