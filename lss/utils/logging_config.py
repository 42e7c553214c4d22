# lss/utils/logging_config.py
import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  logger_name: str = "lss") -> logging.Logger:
    """
    Attach a console handler (and optionally a file handler) to the LSS logger.

    Args:
        level: Logging level, either numeric or a name such as "DEBUG".
        log_file: Optional path to a file for logging output.
        logger_name: Logger to configure; "lss" covers every module of the package.

    Returns:
        The configured logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Clear existing handlers so repeated setup does not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    return logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Retrieve a module logger, optionally forcing its level.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
