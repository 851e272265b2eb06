"""
Logging Setup
^^^^^^^^^^^^^
Provides a setup_logger function configuring logging from the bundled
logger.cfg, and get_stream_logger for a stand-alone stdout logger.

Library modules only create loggers with `logging.getLogger(__name__)`;
nothing here runs on import.
"""
import configparser
import logging
import logging.config
import os
import sys
from typing import Optional

LOGGER_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "logger.cfg"
)


def setup_logger(
    name: str, config_path: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with the provided name using the 'logger.cfg' file, or
    the file at `config_path` when given.
    """
    config = configparser.ConfigParser()
    config.read(config_path or LOGGER_CONFIG_PATH)
    logging.config.fileConfig(config, disable_existing_loggers=False)

    logger = logging.getLogger(name)

    return logger


def get_stream_logger(name: str) -> logging.Logger:
    """
    Get a logger that writes to stdout.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level=logging.INFO)
        stream_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger
