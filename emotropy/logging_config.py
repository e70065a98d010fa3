import logging
import os
from logging.handlers import RotatingFileHandler

from emotropy import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILENAME = "emotropy.log"


def setup_logging(level=None, log_dir=None):
    """
    Set up the root logger for Emotropy.

    Logs go to the console and to a rotating file in ``log_dir`` (5 MB per
    file, five backups). Existing root handlers are removed so repeated calls
    do not duplicate output.

    Args:
        level (str or int): Logging level, e.g. "DEBUG" or logging.INFO.
            Defaults to the LOG_LEVEL environment setting.
        log_dir (str): Directory for the log file. Defaults to EMOTROPY_LOG_DIR.

    Returns:
        logging.Logger: The ``emotropy`` logger.
    """
    level = level if level is not None else config.LOG_LEVEL
    if isinstance(level, str):
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        log_level = level
    log_dir = log_dir or config.LOG_DIR

    logger = logging.getLogger()
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, LOG_FILENAME)

    formatter = logging.Formatter(LOG_FORMAT)

    fh = RotatingFileHandler(log_file, maxBytes=1024 * 1024 * 5, backupCount=5)
    fh.setLevel(log_level)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    app_logger = logging.getLogger('emotropy')
    app_logger.info("Logging (%s) to console and %s", config.ENV, log_file)
    return app_logger
