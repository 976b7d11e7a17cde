from __future__ import annotations

import json
from pathlib import Path

import pytest

from check_digits_utils import config
from check_digits_utils.config import ConfigError, Settings, load_settings


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_default_file_gives_builtin_defaults():
    assert load_settings() == Settings()


def test_default_file_is_used_when_present(tmp_path: Path, monkeypatch):
    path = _write(tmp_path / "settings.json", {"default_method": "isbn"})
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", path)
    assert load_settings().default_method == "isbn"


def test_explicit_path(tmp_path: Path):
    path = _write(tmp_path / "s.json", {"default_method": "ean", "output": "json", "quiet": True})
    settings = load_settings(path)
    assert settings == Settings(default_method="ean", output="json", quiet=True)
    assert settings.json_output


def test_env_var_path(tmp_path: Path, monkeypatch):
    path = _write(tmp_path / "env.json", {"quiet": True})
    monkeypatch.setenv(config.CONFIG_PATH_ENV_VAR, str(path))
    assert load_settings().quiet is True


def test_explicit_missing_file_is_an_error(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.json")


def test_invalid_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)


@pytest.mark.parametrize(
    "document,pointer",
    [
        ({"output": "xml"}, "output"),
        ({"quiet": "yes"}, "quiet"),
        ({"default_method": "no-such-method"}, "default_method"),
        ({"colour": True}, "<root>"),
        (["ean"], "<root>"),
    ],
)
def test_schema_violations(tmp_path: Path, document, pointer):
    path = _write(tmp_path / "bad.json", document)
    with pytest.raises(ConfigError) as excinfo:
        load_settings(path)
    assert f"- {pointer}:" in str(excinfo.value)
