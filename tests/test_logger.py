import logging
from logging.handlers import TimedRotatingFileHandler

from tennis_league.utils import logger as logger_module


def test_setup_logger_writes_rotating_file(root_logger, tmp_path):
    configured = logger_module.setup_logger(log_level="debug", log_dir=str(tmp_path))

    assert configured is root_logger
    assert root_logger.level == logging.DEBUG
    file_handlers = [h for h in root_logger.handlers if isinstance(h, TimedRotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].namer("tennis_league.log.2025-01-01") == "tennis_league.log.2025-01-01.gz"
    assert (tmp_path / "tennis_league.log").exists()


def test_setup_logger_runs_once(root_logger, tmp_path):
    logger_module.setup_logger(log_to_file=False)
    handlers = list(root_logger.handlers)
    logger_module.setup_logger(log_dir=str(tmp_path))
    assert root_logger.handlers == handlers
