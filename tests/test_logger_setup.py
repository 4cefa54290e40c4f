import logging

from lumisky.logger_setup import LOGGER_NAME, setup_logging


def test_setup_logging_writes_run_log(tmp_path):
    logger = setup_logging("debug", log_dir=tmp_path, run_id="unit")
    try:
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert not logger.propagate
        assert len(logger.handlers) == 2

        logger.info("burst")
        for h in logger.handlers:
            h.flush()
        assert "burst" in (tmp_path / "unit" / "lumisky.log").read_text()
    finally:
        for h in logger.handlers:
            h.close()
        logger.handlers.clear()


def test_setup_logging_console_only_is_idempotent():
    logger = setup_logging("INFO", log_dir=None)
    logger = setup_logging("INFO", log_dir=None)
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
