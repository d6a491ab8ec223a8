"""Settings tests: defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from roman_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.host == "0.0.0.0"
    assert s.log_format == "json"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert Settings(_env_file=None).port == 9090


def test_rejects_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
