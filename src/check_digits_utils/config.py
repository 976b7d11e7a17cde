"""Settings loader for the check-digits CLI.

Reads settings from a JSON file and validates them against
``settings.schema.json`` with jsonschema. Every key is optional; command-line
flags override whatever the file sets.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from .methods import get_known_method_ids

SCHEMA_PATH = Path(__file__).resolve().with_name("settings.schema.json")
DEFAULT_CONFIG_PATH = Path("~/.config/check-digits/settings.json")
CONFIG_PATH_ENV_VAR = "CHECK_DIGITS_CONFIG"


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    default_method: str | None = None
    output: str = "text"
    quiet: bool = False

    @property
    def json_output(self) -> bool:
        return self.output == "json"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        return cls(
            default_method=data.get("default_method"),
            output=data.get("output", "text"),
            quiet=data.get("quiet", False),
        )


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the settings file path and whether it must exist.

    Priority:
    1. Explicit path argument
    2. CHECK_DIGITS_CONFIG environment variable
    3. Default path (~/.config/check-digits/settings.json), optional
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return DEFAULT_CONFIG_PATH.expanduser(), False


def _load_schema() -> dict[str, Any]:
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    schema["properties"]["default_method"]["enum"] = get_known_method_ids()
    return schema


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_settings_document(document: Any) -> None:
    """Validate a decoded settings document, raising ConfigError on failure."""
    validator = Draft202012Validator(_load_schema())
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Settings failed validation:\n" + _format_errors(errors))


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the settings file. If not provided, uses the
            CHECK_DIGITS_CONFIG env var or falls back to the per-user default,
            which may be absent.

    Returns:
        A Settings object; built-in defaults when no file is found at the
        per-user default location.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path, required = _resolve_config_path(path)

    if not config_path.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return Settings()

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    validate_settings_document(data)
    return Settings.from_dict(data)
