import logging

from release_props.build.config.logging import bootstrap_logging


def test_log_level_env_override(monkeypatch):
    root_logger = logging.getLogger()
    previous = root_logger.level
    monkeypatch.setenv("LOG_LEVEL", "debug")
    try:
        bootstrap_logging()
        assert root_logger.level == logging.DEBUG
    finally:
        root_logger.setLevel(previous)


def test_invalid_log_level_ignored(monkeypatch, capsys):
    root_logger = logging.getLogger()
    previous = root_logger.level
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    try:
        bootstrap_logging()
        assert root_logger.level == previous
    finally:
        root_logger.setLevel(previous)
    assert "Invalid LOG_LEVEL 'CHATTY'" in capsys.readouterr().err


def test_debug_flag(monkeypatch):
    package_logger = logging.getLogger("release_props")
    previous = package_logger.level
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    try:
        bootstrap_logging(debug=True)
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous)
