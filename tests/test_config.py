from __future__ import annotations

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        ("test", "config.testing"),
        ("TESTING", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_for_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"
