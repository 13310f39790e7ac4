from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.paths import get_logs_dir

LOGGER_NAME = "quartet_editor"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(component)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s %(levelname)-7s [%(component)s] %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    if not component:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def component_name(logger_name: str) -> str:
    """Short name of a project logger, ``app`` for the root project logger."""
    if logger_name == LOGGER_NAME:
        return "app"
    prefix = f"{LOGGER_NAME}."
    if logger_name.startswith(prefix):
        return logger_name[len(prefix):]
    return logger_name


class ComponentFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.component = component_name(record.name)
        return True


class LogEmitter(QObject):
    log_message = Signal(str)
    warning_logged = Signal(str)


class QtSignalLogHandler(logging.Handler):
    """Forwards records to the live log console; warnings also raise ``warning_logged``."""

    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()
        self._emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._emitter.log_message.emit(message)
            if record.levelno >= logging.WARNING:
                self._emitter.warning_logged.emit(record.getMessage())
        except Exception:
            self.handleError(record)


def setup_logging(logs_dir: Path | None = None) -> tuple[logging.Logger, LogEmitter]:
    log_file = (logs_dir or get_logs_dir()) / "app.log"

    logger = get_logger()
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    component_filter = ComponentFilter()

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    file_handler.addFilter(component_filter)
    file_handler.setLevel(logging.INFO)

    emitter = LogEmitter()
    signal_handler = QtSignalLogHandler(emitter)
    signal_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    signal_handler.addFilter(component_filter)
    signal_handler.setLevel(logging.INFO)

    logger.addHandler(file_handler)
    logger.addHandler(signal_handler)

    return logger, emitter
