"""
Logging setup module.
Every module logs through logging.getLogger(__name__); the host calls
setup_logger() once to attach a console handler.
"""
import logging
import sys


def setup_logger(level=logging.INFO):
    """Configure the root logger."""
    root_logger = logging.getLogger()

    # Avoid stacking handlers on repeated setup
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '[%(levelname)s] %(name)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    return root_logger


def get_logger(name):
    """Get a module logger."""
    return logging.getLogger(name)
