# -*- coding: utf-8 -*-
"""
Tests for process_manager.py and config/logging_config.py
"""
import logging
import logging.handlers

import pytest

from config.bot_config import BotConfig
from config.logging_config import CONSOLE_HANDLER_NAME, setup_logging
from core.utils.api_client import WeatherAPIClient
from process_manager import ProcessManager


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def make_config(tmp_path):
    return BotConfig(
        slack_bot_token="xoxb",
        slack_app_token="xapp",
        rapidapi_key="key",
        rapidapi_host="weather.example.test",
        log_level="DEBUG",
        logs_dir=tmp_path / "logs",
    )


def test_initialize_and_shutdown(tmp_path, clean_root_logger):
    manager = ProcessManager()
    manager.initialize_sync(make_config(tmp_path))

    assert manager.initialized
    assert isinstance(manager.weather_client, WeatherAPIClient)
    assert manager.weather_client.api_key == "key"
    assert manager.weather_client.headers["X-RapidAPI-Host"] == "weather.example.test"
    assert (tmp_path / "logs" / "app.log").exists()

    manager.shutdown_sync()
    assert not manager.initialized
    assert manager.weather_client is None

    # Second shutdown is a no-op
    manager.shutdown_sync()


def test_initialize_is_idempotent(tmp_path, clean_root_logger):
    manager = ProcessManager()
    manager.initialize_sync(make_config(tmp_path))
    client = manager.weather_client

    manager.initialize_sync(make_config(tmp_path))

    assert manager.weather_client is client


def test_setup_logging_does_not_duplicate_handlers(tmp_path, clean_root_logger):
    setup_logging("INFO", tmp_path)
    setup_logging("INFO", tmp_path)

    file_handlers = [
        h for h in clean_root_logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("slack_bolt").level == logging.WARNING


def test_setup_logging_with_new_dir_keeps_one_console(tmp_path, clean_root_logger):
    setup_logging("INFO", tmp_path / "first")
    setup_logging("INFO", tmp_path / "second")

    consoles = [h for h in clean_root_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert len(consoles) == 1
    assert (tmp_path / "second" / "app.log").exists()
