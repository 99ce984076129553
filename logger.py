"""Logging configuration module for the token report application."""
import os
import logging
from logging.handlers import RotatingFileHandler
import config

LOGGER_NAMES = ('app', 'error', 'debug')

# Handlers attached by setup_logging, keyed by logger name ('' is root)
_installed_handlers = {}


def _install(logger, handler):
    logger.addHandler(handler)
    _installed_handlers.setdefault(logger.name if logger.name != 'root' else '', []).append(handler)


def reset_logging():
    """Detach and close every handler previously attached by setup_logging."""
    for name, handlers in _installed_handlers.items():
        logger = logging.getLogger(name)
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
    _installed_handlers.clear()


def setup_logging():
    """Set up logging with appropriate handlers and formatters.

    Safe to call more than once; handlers from an earlier call are replaced.
    """
    reset_logging()

    # Ensure logs directory exists
    os.makedirs(config.LOGS_FOLDER, exist_ok=True)

    # Log file paths
    app_log_path = os.path.join(config.LOGS_FOLDER, 'app.log')
    error_log_path = os.path.join(config.LOGS_FOLDER, 'error.log')
    debug_log_path = os.path.join(config.LOGS_FOLDER, 'debug.log')

    # Log formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s - %(message)s'
    )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)

    # Console handler writes to stderr; stdout carries the report
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(simple_formatter)
    console_handler.setLevel(logging.WARNING)
    _install(root_logger, console_handler)

    # 1. App Logger (INFO level)
    app_logger = logging.getLogger('app')
    app_logger.setLevel(logging.INFO)
    app_handler = RotatingFileHandler(
        app_log_path, maxBytes=config.APP_LOG_MAX_BYTES, backupCount=config.APP_LOG_BACKUPS
    )
    app_handler.setFormatter(simple_formatter)
    app_handler.setLevel(logging.INFO)
    _install(app_logger, app_handler)

    # 2. Error Logger (ERROR level)
    error_logger = logging.getLogger('error')
    error_logger.setLevel(logging.ERROR)
    error_handler = RotatingFileHandler(
        error_log_path, maxBytes=config.ERROR_LOG_MAX_BYTES, backupCount=config.ERROR_LOG_BACKUPS
    )
    error_handler.setFormatter(detailed_formatter)
    error_handler.setLevel(logging.ERROR)
    _install(error_logger, error_handler)

    # 3. Debug Logger (DEBUG level)
    debug_logger = logging.getLogger('debug')
    debug_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    debug_handler = RotatingFileHandler(
        debug_log_path, maxBytes=config.DEBUG_LOG_MAX_BYTES, backupCount=config.DEBUG_LOG_BACKUPS
    )
    debug_handler.setFormatter(detailed_formatter)
    debug_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    _install(debug_logger, debug_handler)

    return get_loggers()


def get_loggers():
    """Get configured logger instances."""
    return {name: logging.getLogger(name) for name in LOGGER_NAMES}
