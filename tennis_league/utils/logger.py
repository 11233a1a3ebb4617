# tennis_league/utils/logger.py
"""
Centralized logging configuration for the Tennis League service.

Logs go to the console and to a daily rotating file; rotated files are
gzip-compressed and kept for ``backup_count`` days.
"""
import gzip
import logging
import os
import shutil
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_configured = False


def gz_namer(name):
    return name + ".gz"


def gz_rotator(source, dest):
    with open(source, 'rb') as f_in:
        with gzip.open(dest, 'wb') as f_out:
            shutil.copyfileobj(f_in, f_out)
    os.remove(source)


def setup_logger(
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_dir: Optional[str] = None,
    log_filename: str = "tennis_league.log",
    backup_count: int = 30,
) -> logging.Logger:
    """
    Configure and return the root logger.

    Call once at startup, before the application is imported. Later calls
    return the already configured root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also log to a rotating file
        log_dir: Directory for log files (default: <cwd>/logs)
        log_filename: Base name of the log file
        backup_count: Number of daily rotations to keep

    Returns:
        Configured root logger
    """
    global _logging_configured

    root_logger = logging.getLogger()
    if _logging_configured:
        return root_logger

    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_path = Path(log_dir) if log_dir else Path.cwd() / "logs"
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            log_path / log_filename,
            when='midnight',
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.rotator = gz_rotator
        file_handler.namer = gz_namer
        root_logger.addHandler(file_handler)
        root_logger.info(f"File logging enabled: {log_path / log_filename}")

    _logging_configured = True
    root_logger.info(f"Tennis League API - Logging initialized at {log_level.upper()} level")
    return root_logger
