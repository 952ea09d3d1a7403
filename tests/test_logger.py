# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

from page_scout.logger import init_logging


def test_init_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "scout.log"
    try:
        lg = init_logging(level="DEBUG", log_file=log_file)
        assert lg.name == "PageScout"
        assert lg.level == logging.DEBUG
        assert [type(h) for h in lg.handlers] == [logging.StreamHandler, RotatingFileHandler]

        lg.debug("snapshot ready")
        for handler in lg.handlers:
            handler.flush()
        assert "snapshot ready" in log_file.read_text(encoding="utf-8")

        again = init_logging()
        assert again is lg
        assert [type(h) for h in lg.handlers] == [logging.StreamHandler]
        assert lg.level == logging.WARNING
    finally:
        for handler in logging.getLogger("PageScout").handlers:
            handler.close()
        init_logging()
