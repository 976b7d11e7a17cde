from __future__ import annotations

import pytest

from check_digits_utils import config


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    # Keep the user's own settings file out of the tests.
    monkeypatch.delenv(config.CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "absent" / "settings.json")
