import logging
from logging.handlers import RotatingFileHandler

import pytest

from ambientimpact_core.logger import LogNoiseFilter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(message):
    return logging.LogRecord("x", logging.INFO, __file__, 1, message, None, None)


def test_setup_logging_writes_to_file(tmp_path, restore_root_logger):
    log_file = setup_logging(log_dir=str(tmp_path / "logs"), debug=False)

    get_logger("Test").debug("nur in der Datei")
    for handler in logging.getLogger().handlers:
        handler.flush()

    root = logging.getLogger()
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    with open(log_file, encoding="utf-8") as f:
        assert "nur in der Datei" in f.read()


def test_noise_filter_hides_websocket_chatter():
    quiet = LogNoiseFilter(debug=False)
    chatty = LogNoiseFilter(debug=True)

    assert not quiet.filter(_record("WebSocket connection open"))
    assert quiet.filter(_record("Komponente registriert"))
    assert chatty.filter(_record("WebSocket connection open"))
