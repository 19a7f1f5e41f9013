from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest

from rss_articles.log import setup_logging


@pytest.fixture
def configure():
    root = logging.getLogger()
    level = root.level
    installed = []

    def _configure(*args):
        setup_logging(*args)
        installed.extend(root.handlers)
        return root

    yield _configure

    for handler in installed:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def test_console_only(configure):
    root = configure("debug")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_rotating_file(configure, tmp_path):
    log_file = tmp_path / "logs" / "rss.log"
    root = configure("INFO", str(log_file))
    logging.getLogger("rss_articles.test").info("hello file")

    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    for handler in root.handlers:
        handler.flush()
    assert "INFO rss_articles.test: hello file" in log_file.read_text(encoding="utf-8")
