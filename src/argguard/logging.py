import logging

from .config import Settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Checks are library calls: stay at WARNING unless ARGGUARD_LOG_LEVEL says otherwise
    settings = Settings.from_env()
    default_level = logging.getLevelName(Settings.log_level)
    try:
        level = getattr(logging, settings.log_level.upper())
    except AttributeError:
        level = default_level

    logger.setLevel(level)
    return logger
