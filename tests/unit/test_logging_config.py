"""Tests for structured logging configuration."""

import json
import logging
import re

import pytest
import structlog

from factory_resolver.adapters import OrmAdapter
from factory_resolver.config import ResolverSettings
from factory_resolver.logging_config import setup_logging, setup_logging_from_settings
from factory_resolver.resolver import FactoryResolver
from tests.unit.sample_models import One


def strip_ansi(text):
    """Strip ANSI escape sequences from text."""
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi_escape.sub("", text)


def parse_json_lines(output):
    """Parse output containing multiple JSON lines."""
    lines = output.strip().split("\n")
    return [json.loads(line) for line in lines if line.strip()]


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test."""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestLoggingSetup:
    def test_setup_logging_json_format(self, capsys):
        setup_logging(service_name="test_service", log_format="json", log_level="INFO")

        logger = structlog.get_logger()
        logger.info("test_event", key1="value1", key2=123)

        entries = parse_json_lines(capsys.readouterr().out)
        log_entry = next((e for e in entries if e.get("event") == "test_event"), None)

        assert log_entry is not None
        assert log_entry["service"] == "test_service"
        assert log_entry["key1"] == "value1"
        assert log_entry["key2"] == 123
        assert log_entry["level"] == "info"
        assert "timestamp" in log_entry

    def test_setup_logging_console_format(self, capsys):
        setup_logging(service_name="test_service", log_format="console", log_level="INFO")

        structlog.get_logger().info("test_event", key1="value1")

        output = strip_ansi(capsys.readouterr().out)
        assert "test_event" in output
        assert "key1=value1" in output

    def test_setup_logging_from_env(self, monkeypatch, capsys):
        monkeypatch.setenv("SERVICE_NAME", "env_service")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        setup_logging()
        structlog.get_logger().debug("debug_event", test=True)

        entries = parse_json_lines(capsys.readouterr().out)
        log_entry = next((e for e in entries if e.get("event") == "debug_event"), None)

        assert log_entry is not None
        assert log_entry["service"] == "env_service"
        assert log_entry["level"] == "debug"

    def test_log_level_filtering(self, capsys):
        setup_logging(service_name="test_service", log_format="console", log_level="WARNING")

        logger = structlog.get_logger()
        logger.info("info_event")
        logger.warning("warning_event")

        output = strip_ansi(capsys.readouterr().out)
        assert "info_event" not in output
        assert "warning_event" in output

    def test_setup_from_settings(self, capsys):
        settings = ResolverSettings(
            service_name="settings_service", log_format="json", log_level="DEBUG", _env_file=None
        )

        setup_logging_from_settings(settings)
        structlog.get_logger().info("settings_event")

        entries = parse_json_lines(capsys.readouterr().out)
        log_entry = next(e for e in entries if e.get("event") == "settings_event")
        assert log_entry["service"] == "settings_service"


class TestResolverLogging:
    def test_collision_logged(self, models, capsys, monkeypatch):
        setup_logging(service_name="test_service", log_format="json", log_level="DEBUG")
        monkeypatch.setattr(
            OrmAdapter, "model_classes", classmethod(lambda cls: [One, One])
        )

        FactoryResolver([OrmAdapter]).factories_by_name()

        entries = parse_json_lines(capsys.readouterr().out)
        overridden = [e for e in entries if e.get("event") == "factory_name_overridden"]
        assert len(overridden) == 1
        assert overridden[0]["factory"] == "one"

    def test_create_logged(self, models, capsys):
        setup_logging(service_name="test_service", log_format="json", log_level="INFO")
        models.register(One)

        FactoryResolver([OrmAdapter]).create("one")

        entries = parse_json_lines(capsys.readouterr().out)
        created = next(e for e in entries if e.get("event") == "factory_create")
        assert created["adapter"] == "OrmAdapter"
