"""
Logging configuration for the route finder CLIs.
"""

import logging
import os
import sys

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _writes_to(handler, log_file):
    return getattr(handler, "baseFilename", None) == os.path.abspath(log_file)


def setup_logger(level="WARNING", log_file=None):
    """Setup and configure the root logger.

    Calling it again with the same ``log_file`` does not add a second handler
    for that file; a different file gets its own handler.

    Args:
        level (str|int): Logging level name or number.
        log_file (str): Optional file that receives a copy of every record.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    formatter = logging.Formatter(FORMAT)
    if not logger.handlers:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        logger.addHandler(stream)
    if log_file is not None and not any(
        _writes_to(handler, log_file) for handler in logger.handlers
    ):
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    return logger
