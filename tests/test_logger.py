# test_logger.py

import logging
from contextlib import contextmanager

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stylerun import Logger


@contextmanager
def bare_root_logger():
    """basicConfig only configures a root logger that has no handlers yet."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestLogger:

    def test_disabled_logger_installs_null_handler(self):
        log = Logger("stylerun.test.disabled")
        handlers = logging.getLogger("stylerun.test.disabled").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
        log.debug("quiet")

    def test_level_methods_forward(self, caplog):
        log = Logger("stylerun.test.forward")
        with caplog.at_level(logging.DEBUG, logger="stylerun.test.forward"):
            log.debug("debug message")
            log.warning("warning message")
        assert "debug message" in caplog.text
        assert "warning message" in caplog.text


class TestEnabledLogger:

    def test_writes_debug_to_log_file(self, tmp_path):
        log_file = tmp_path / "x.log"
        with bare_root_logger() as root:
            log = Logger("stylerun.test.file", True, log_file=str(log_file))
            log.debug("written to file")
            assert root.level == logging.DEBUG
        assert "DEBUG - written to file" in log_file.read_text()

    def test_dash_logs_to_stdout(self, capsys):
        with bare_root_logger():
            log = Logger("stylerun.test.stdout", True, "-")
            log.info("written to stdout")
        assert "INFO - written to stdout" in capsys.readouterr().out
