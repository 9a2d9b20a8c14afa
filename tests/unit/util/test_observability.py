"""Unit tests for Logfire configuration choices."""

from blog.config import ObservabilitySettings, Settings
from blog.util.observability import _send_to_logfire


def test_console_only_without_token():
    settings = Settings(observability=ObservabilitySettings())

    assert _send_to_logfire(settings) is False


def test_token_enables_sending():
    settings = Settings(observability=ObservabilitySettings(logfire_token="pylf_x"))

    assert _send_to_logfire(settings) is True


def test_explicit_setting_wins():
    settings = Settings(
        observability=ObservabilitySettings(logfire_token="pylf_x", send_to_logfire=False)
    )

    assert _send_to_logfire(settings) is False
