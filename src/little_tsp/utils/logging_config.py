import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
        name: str,
        level: int = logging.INFO,
        log_file: Optional[str] = None,
        stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures and returns a logger with a console handler and an optional file handler.

    Existing handlers on the logger are cleared first so repeated calls do
    not duplicate messages.

    Parameters
    ----------
    name : str
        Logger name, usually the package name so every module logger below it
        shares the handlers.
    level : int
        Level of the logger and of both handlers.
    log_file : str, optional
        Append records to this file as well; parent directories are created.
    stream : TextIO, optional
        Console stream. Defaults to `sys.stdout`; pass `sys.stderr` when
        stdout carries machine-readable output.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_path}")

    return logger
