"""Logging utilities for the live score display."""

import logging

DEFAULT_LOG_FILE = "/tmp/snookerlive_debug.log"

# Global state
_log_file = DEFAULT_LOG_FILE
_file_logger = None


def set_log_file(path: str):
    """Choose where the debug log goes. Only effective before the first log() call."""
    global _log_file
    _log_file = path


def _get_file_logger() -> logging.Logger:
    global _file_logger

    if _file_logger is None:
        _file_logger = logging.getLogger("snookerlive_file")
        _file_logger.setLevel(logging.DEBUG)
        file_handler = logging.FileHandler(_log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        _file_logger.addHandler(file_handler)
        _file_logger.propagate = False

    return _file_logger


def log(message: str):
    """
    Log a status line:
    - Always logs to file for debugging
    - Also prints to the console
    """
    _get_file_logger().info(message)

    print(message)


def debug(message: str):
    """Log to the debug file only, keeping chatty lines off the score board"""
    _get_file_logger().debug(message)
