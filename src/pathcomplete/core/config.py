"""Completion options and layered configuration loading using Pydantic."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathcomplete.core.request import CompletionRequest

FOLDER_PLACEHOLDER = "${folder}"


def default_get_cwd(request: CompletionRequest) -> str:
    """Directory of the request's buffer, or the process cwd for unnamed buffers."""
    if request.buffer_path:
        return os.path.dirname(os.path.abspath(request.buffer_path))
    return os.getcwd()


class CompletionOption(BaseModel):
    """Options for one completion request. Immutable once validated."""

    model_config = ConfigDict(frozen=True)

    trailing_slash: StrictBool = False
    label_trailing_slash: StrictBool = True
    get_cwd: Callable[[CompletionRequest], str] = Field(
        default=default_get_cwd,
        validation_alias=AliasChoices("get_cwd", "current_working_directory_provider"),
    )
    path_mappings: dict[str, str] = Field(default_factory=dict)


class EnvSettings(BaseSettings):
    """Environment variable overrides."""

    model_config = SettingsConfigDict(
        env_prefix="PATHCOMPLETE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    preview_max_lines: int = 20


def validate_option(overrides: Mapping[str, Any] | None = None) -> CompletionOption:
    """Merge caller overrides over the defaults and validate them.

    Raises pydantic.ValidationError when a value has the wrong shape, e.g.
    ``path_mappings`` that is not a mapping of strings.
    """
    return CompletionOption.model_validate(dict(overrides or {}))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, override wins on conflicts."""
    result = {**base}
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML config file, return empty dict if not found."""
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _resolve_env_vars(value: Any) -> Any:
    """Recursively replace ${ENV_VAR} references with actual env values.

    Unset variables and the ${folder} placeholder are preserved as-is.
    """
    if isinstance(value, str):
        return _ENV_REF.sub(
            lambda m: m.group(0)
            if m.group(0) == FOLDER_PLACEHOLDER
            else os.environ.get(m.group(1), m.group(0)),
            value,
        )
    if isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env_vars(item) for item in value]
    return value


def load_config(project_dir: Path | None = None) -> dict[str, Any]:
    """Load option overrides with layered precedence.

    Order (later overrides earlier):
    1. ~/.pathcomplete/config.yaml (global user config)
    2. .pathcomplete/config.yaml (project-level config)

    The result is a raw overrides dict; pass it to ``validate_option``.
    """
    global_config_dir = Path.home() / ".pathcomplete"
    project_config_dir = (project_dir or Path.cwd()) / ".pathcomplete"

    merged: dict[str, Any] = {}
    for config_path in [
        global_config_dir / "config.yaml",
        project_config_dir / "config.yaml",
    ]:
        layer = load_yaml_config(config_path)
        merged = _deep_merge(merged, layer)

    return _resolve_env_vars(merged)
