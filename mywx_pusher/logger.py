import logging
import logging.handlers
import os
import socket
import sys
from typing import Optional

from mywx_pusher.types import Settings

LOGGER_NAME = "mywx_pusher"


class LoggerSetup:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        """
        Initialize the logger based on settings.

        Settings may contain:
        - log_type: "console", "file", "syslog" or "both"
        - log_level: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
        - debug: forces DEBUG level when true
        - log_file: path to the log file (if log_type is "file" or "both")
        - log_max_size: maximum size of the log file in bytes before rotation
        - log_backup_count: number of backup log files to keep
        - log_format: custom log format (optional)

        A console handler writing to stderr is always attached.
        """
        self.settings: Settings = settings or {}
        self.logger: Optional[logging.Logger] = None
        self.setup_logger()

    def _file_handler(self, formatter: logging.Formatter) -> logging.Handler:
        log_file: str = self.settings.get("log_file", "mywx_pusher.log")
        log_max_size: int = self.settings.get("log_max_size", 5 * 1024 * 1024)  # 5MB default
        log_backup_count: int = self.settings.get("log_backup_count", 3)

        log_dir: str = os.path.dirname(os.path.abspath(log_file))
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=log_max_size,
            backupCount=log_backup_count
        )
        file_handler.setFormatter(formatter)
        return file_handler

    def setup_logger(self) -> None:
        """Configure logger based on settings"""
        log_type: str = self.settings.get("log_type", "console")
        log_level_str: str = self.settings.get("log_level", "INFO")

        if self.settings.get("debug"):
            log_level: int = logging.DEBUG
        else:
            log_level = getattr(logging, log_level_str.upper(), logging.INFO)

        logger: logging.Logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(log_level)

        if logger.handlers:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()

        log_format: str = self.settings.get("log_format",
                                            '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
                                            )
        formatter: logging.Formatter = logging.Formatter(log_format)

        if log_type in ["file", "both"]:
            logger.addHandler(self._file_handler(formatter))

        if log_type in ["syslog", "both"]:
            try:
                if sys.platform == 'darwin':
                    syslog_handler: logging.Handler = logging.handlers.SysLogHandler('/var/run/syslog')
                else:
                    syslog_handler = logging.handlers.SysLogHandler('/dev/log')

                syslog_handler.setFormatter(formatter)
                logger.addHandler(syslog_handler)
            except (OSError, socket.error) as e:
                logger.warning(f"Could not connect to syslog: {e}")
                if log_type == "syslog":
                    logger.addHandler(self._file_handler(formatter))

        console_handler: logging.StreamHandler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        self.logger = logger

    def get_logger(self) -> logging.Logger:
        """Return the configured logger"""
        if self.logger is None:
            self.setup_logger()
        assert self.logger is not None
        return self.logger


def get_logger(settings: Optional[Settings] = None) -> logging.Logger:
    """Get a configured logger based on settings"""
    logger_setup = LoggerSetup(settings)
    return logger_setup.get_logger()
