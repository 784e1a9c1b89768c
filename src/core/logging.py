import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def _resolve_level(level: str) -> int:
    # unknown level names fall back to INFO
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        return logging.INFO
    return resolved


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
