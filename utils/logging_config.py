"""
Logging configuration utility for the hashcheck CLI and services.
"""
import logging
import sys
import os

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(module)s::%(funcName)s - %(message)s'


def setup_logging(verbosity: int = 0, logfile: str = None) -> None:
    """
    Configure logging level and optional file output.

    Console output goes to stderr so that digests printed on stdout stay
    machine-readable.

    Args:
        verbosity (int): Verbosity level (0=off, 1=info, 2=debug).
        logfile (str, optional): Path to log file. If None, logs only to console.

    Returns:
        None
    """
    if verbosity == 0:
        level = logging.CRITICAL + 1  # disables all log output to terminal
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    # A log file always records at least INFO, even when the console is silent
    file_level = min(level, logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger()
    logger.setLevel(file_level if logfile else level)
    logger.handlers.clear()

    # Console handler
    if verbosity > 0:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    # Optional file handler
    if logfile:
        logdir = os.path.dirname(logfile)
        if logdir:
            os.makedirs(logdir, exist_ok=True)
        file_handler = logging.FileHandler(logfile, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level)
        logger.addHandler(file_handler)

    logger.debug(f"Command line: {' '.join(sys.argv)}")
    logger.debug(f"Current working directory: {os.getcwd()}")
