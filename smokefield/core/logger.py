"""
Logging System for Smokefield
Console logging at a configurable level, plus an optional per-run debug file
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "Smokefield"
LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s'

Level = Union[int, str]


def parse_level(level: Level) -> int:
    """Accept a logging constant or a level name as stored in settings.json."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


class SmokeLogger:
    _instance: Optional['SmokeLogger'] = None

    def __init__(self, log_dir: str = "logs", log_level: Level = logging.INFO,
                 to_file: bool = True):
        if SmokeLogger._instance is not None:
            raise RuntimeError("SmokeLogger is a singleton. Use get_logger() instead.")

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()
        formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

        self.console_handler = logging.StreamHandler()
        self.console_handler.setLevel(parse_level(log_level))
        self.console_handler.setFormatter(formatter)
        self.logger.addHandler(self.console_handler)

        # The file always records everything; the console follows settings
        self.log_dir = Path(log_dir)
        self.log_file: Optional[Path] = None
        if to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = self.log_dir / f"smokefield_{timestamp}.log"
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        SmokeLogger._instance = self
        self.debug("Logger initialized")

    def set_level(self, level: Level):
        """Change the console level, e.g. after settings have been loaded."""
        self.console_handler.setLevel(parse_level(level))

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    @classmethod
    def get_instance(cls) -> 'SmokeLogger':
        if cls._instance is None:
            cls._instance = SmokeLogger()
        return cls._instance

    @classmethod
    def shutdown(cls):
        if cls._instance:
            for handler in cls._instance.logger.handlers:
                handler.close()
            cls._instance.logger.handlers.clear()
            cls._instance = None

def get_logger() -> SmokeLogger:
    return SmokeLogger.get_instance()

def init_logger(log_dir: str = "logs", log_level: Level = logging.INFO,
                to_file: bool = True) -> SmokeLogger:
    if SmokeLogger._instance is None:
        SmokeLogger(log_dir, log_level, to_file)
    return get_logger()
