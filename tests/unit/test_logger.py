"""
Unit tests for session logging.
"""

import json
import logging

import pytest
import structlog

from profile_card.form_controller import FormController
from profile_card.models.config import AppSettings
from profile_card.utils.logger import (
    MASKED_VALUE,
    configure_logging,
    get_logger,
    mask_personal_data,
)


@pytest.fixture
def restore_default_logging():
    """Put default logging back after a test reconfigures it."""
    yield
    configure_logging(AppSettings())


class TestMaskPersonalData:
    """Test cases for mask_personal_data processor."""

    @pytest.mark.parametrize(
        "key", ["email", "contact_email", "bio-text", "username_raw", "access_token"]
    )
    def test_personal_keys_masked(self, key):
        event_dict = {"event": "x", key: "jane@example.com"}

        result = mask_personal_data(None, "info", event_dict)

        assert result[key] == MASKED_VALUE

    def test_other_keys_untouched(self):
        """Test field names and counters pass through."""
        event_dict = {
            "event": "Field updated",
            "field": "email",
            "link_count": 2,
            "biography_length": 10,
            "schema_name": "app_settings_schema.json",
        }

        result = mask_personal_data(None, "info", dict(event_dict))

        assert result == event_dict

    def test_event_text_never_masked(self):
        result = mask_personal_data(None, "info", {"event": "email"})

        assert result["event"] == "email"


class TestConfigureLogging:
    """Test that AppSettings drive the log level and file."""

    def test_level_and_file_from_settings(self, tmp_path, restore_default_logging):
        log_file = tmp_path / "logs" / "custom.log"

        configure_logging(AppSettings(log_level="DEBUG", log_file=str(log_file)))

        assert logging.getLogger().level == logging.DEBUG
        assert log_file.exists()

    def test_reconfigure_replaces_handlers(self, tmp_path, restore_default_logging):
        """Test a second call switches files instead of stacking handlers."""
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        configure_logging(AppSettings(log_file=str(first)))
        configure_logging(AppSettings(log_level="WARNING", log_file=str(second)))

        get_logger("test").warning("Switched")

        assert "Switched" in second.read_text(encoding="utf-8")
        assert "Switched" not in first.read_text(encoding="utf-8")
        assert logging.getLogger().level == logging.WARNING

    def test_form_controller_applies_settings(self, tmp_path, restore_default_logging):
        """Test a session's settings reach the root logger and log file."""
        log_file = tmp_path / "session.log"
        settings = AppSettings(log_level="DEBUG", log_file=str(log_file))

        controller = FormController(settings=settings)
        controller.set_email("jane@example.com")

        assert logging.getLogger().level == logging.DEBUG
        lines = [
            json.loads(line)
            for line in log_file.read_text(encoding="utf-8").splitlines()
            if line.startswith("{")
        ]
        field_events = [line for line in lines if line["event"] == "Field updated"]
        assert field_events[0]["level"] == "debug"
        assert field_events[0]["field"] == "email"
        assert field_events[0]["session_id"] == controller.profile.id
        assert "jane@example.com" not in log_file.read_text(encoding="utf-8")

    def test_info_level_drops_debug_events(self, tmp_path, restore_default_logging):
        log_file = tmp_path / "session.log"

        controller = FormController(settings=AppSettings(log_file=str(log_file)))
        controller.set_name("Jane")

        contents = log_file.read_text(encoding="utf-8")
        assert "Form session started" in contents
        assert "Field updated" not in contents


class TestGetLogger:
    """Test cases for get_logger."""

    def test_binds_component_and_session(self):
        get_logger("warmup")
        with structlog.testing.capture_logs() as logs:
            get_logger("form_controller", session_id="session-1").info("Started")

        assert logs[0]["component"] == "form_controller"
        assert logs[0]["session_id"] == "session-1"

    def test_session_optional(self):
        get_logger("warmup")
        with structlog.testing.capture_logs() as logs:
            get_logger("preview").info("Rendered")

        assert "session_id" not in logs[0]
