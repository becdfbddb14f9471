from __future__ import annotations

import pytest

from core.config import AppSettings, env_name


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep the developer's AZURE_DEVOPS_* variables and .env files out of tests."""

    for field in AppSettings.model_fields:
        monkeypatch.delenv(env_name(field), raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("APPDATA", str(home / "AppData"))

    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_settings():
    def factory(**values) -> AppSettings:
        return AppSettings(_env_file=None, **values)

    return factory


@pytest.fixture
def settings(make_settings) -> AppSettings:
    return make_settings()
