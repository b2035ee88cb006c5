"""
Decal Forge logging.

One `decal_forge` logger writes to stdout and to two rotating files under
settings.LOG_DIR: app.log (everything) and error.log (errors only). Agents
and routes log through child loggers so each line names its source.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from decal_forge.core.config import settings

LOGS_DIR = settings.LOG_DIR
LOGS_DIR.mkdir(parents=True, exist_ok=True)

ROOT_LOGGER_NAME = "decal_forge"

FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s'
CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 5


def _rotating_handler(filename: str, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        LOGS_DIR / filename,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger() -> logging.Logger:
    """Configure the decal_forge logger. Safe to call more than once."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Re-imports (uvicorn reload) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    logger.addHandler(_rotating_handler("app.log", logging.DEBUG))
    logger.addHandler(_rotating_handler("error.log", logging.ERROR))

    return logger


logger = setup_logger()


def get_logger(name: str) -> logging.Logger:
    """Child of the decal_forge logger, e.g. get_logger("painter")."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def format_context(context: dict = None) -> str:
    """{"prompt": "a fox"} -> " | prompt=a fox" """
    if not context:
        return ""
    return " | " + " | ".join(f"{k}={v}" for k, v in context.items())


def log_agent_action(agent_name: str, action: str, details: str = "", success: bool = True):
    """One line per step of the UI spec flow, under decal_forge.agent.<name>."""
    status = "✓" if success else "✗"
    get_logger(f"agent.{agent_name}").info(f"[{status}] {action} | {details}")


def log_error(message: str, error: Exception = None, context: dict = None):
    error_logger = get_logger("error")
    if error:
        error_logger.error(f"{message}: {error}{format_context(context)}", exc_info=error)
    else:
        error_logger.error(f"{message}{format_context(context)}")
