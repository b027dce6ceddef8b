"""Logging setup for the mdblocks logger namespace"""

import logging


ROOT_LOGGER = "mdblocks"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def setup_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the mdblocks logger; later calls only change the level."""
    global _configured
    lvl = getattr(logging, level.upper(), logging.WARNING)
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(lvl)
    if _configured:
        return

    root.propagate = False
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the mdblocks namespace (use get_logger(__name__))."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
