"""
Logging setup for Shop Analytics Service
"""
import logging

_INITIALIZED = False


def init_logging(log_level: str = "INFO") -> None:
    """Configure the root logger once; later calls are no-ops"""
    global _INITIALIZED
    if _INITIALIZED:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    logging.basicConfig(level=level, format=fmt, handlers=[logging.StreamHandler()])
    _INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. get_logger(__name__)"""
    return logging.getLogger(name)
