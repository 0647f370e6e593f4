"""Logger module."""

import logging
import sys

import colorlog

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

loggers: dict[str, logging.Logger] = {}


def _parse_level(log_level: str) -> int:
    level = LOG_LEVELS.get(log_level.upper())
    if level is None:
        err_msg = f"Invalid log level: {log_level}"
        raise ValueError(err_msg)
    return level


def _build_handler(log_handler: str, *, log_color: bool) -> logging.Handler:
    if log_handler != "stdout":
        err_msg = f"Invalid handler: {log_handler}"
        raise ValueError(err_msg)

    if not log_color:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s " + LOG_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    )
    return handler


def get_logger(
    name: str,
    log_handler: str = "stdout",
    log_level: str = "INFO",
    log_color: bool = False,
) -> logging.Logger:
    """Get a cached logger writing to stdout.

    Args:
        name: The name of the logger.
        log_handler: The log handler type ('stdout').
        log_level: The logging level, case-insensitive
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
        log_color: Whether to use colored output.

    Returns:
        logging.Logger: Configured logger instance. A second call with the
        same name returns the first instance unchanged.

    Raises:
        ValueError: If invalid handler or log level is provided.
    """
    if name in loggers:
        return loggers[name]

    level = _parse_level(log_level)
    handler = _build_handler(log_handler, log_color=log_color)
    handler.setLevel(level)

    logger = colorlog.getLogger(name) if log_color else logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)

    loggers[name] = logger
    return logger


def set_log_level(log_level: str) -> None:
    """Change the level of every logger handed out by get_logger.

    Used by the command-line tool once arguments are parsed, after library
    modules have already created their loggers at import time.

    Raises:
        ValueError: If the log level is unknown.
    """
    level = _parse_level(log_level)
    for logger in loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


__all__ = ["LOG_LEVELS", "get_logger", "set_log_level"]
