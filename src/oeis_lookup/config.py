"""Configuration management for the OEIS lookup client."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Iterable, Literal, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError, field_validator

from oeis_lookup import __version__
from oeis_lookup.utils.errors import ConfigError

ENV_PREFIX_FALLBACK = "OEIS_LOOKUP"
ENV_SEPARATOR = "__"


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        if (
            isinstance(value, Mapping)
            and key in target
            and isinstance(target[key], Mapping)
        ):
            target[key] = _deep_update(dict(target[key]), value)
        else:
            target[key] = value
    return target


def _build_nested(path: Iterable[str], value: Any) -> dict[str, Any]:
    keys = list(path)
    if not keys:
        msg = "Override keys must not be empty"
        raise ConfigError(msg)
    nested: dict[str, Any] = {}
    cursor = nested
    for key in keys[:-1]:
        cursor[key] = {}
        cursor = cursor[key]
    cursor[keys[-1]] = value
    return nested


def _coerce_value(raw: str) -> Any:
    try:
        loaded = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return loaded


class OEISSettings(BaseModel):
    """Location of the sequence database search endpoint."""

    model_config = ConfigDict(extra="forbid")

    base_url: HttpUrl = Field(default="https://oeis.org", validate_default=True)
    search_path: str = Field(default="search")
    results: int = Field(default=1, ge=1)

    @property
    def search_url(self) -> str:
        return f"{str(self.base_url).rstrip('/')}/{self.search_path.lstrip('/')}"


class HTTPSettings(BaseModel):
    """Global HTTP client settings."""

    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default=f"oeis-lookup/{__version__}")
    headers: dict[str, str] = Field(default_factory=dict)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="WARNING")
    console_format: Literal["text", "json"] = Field(default="text")
    log_file: Path | None = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        normalised = value.upper()
        if normalised not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return normalised


class CLISettings(BaseModel):
    """Command-line interface related configuration."""

    model_config = ConfigDict(extra="forbid")

    env_prefix: str = Field(default=ENV_PREFIX_FALLBACK)
    allow_env_override: bool = Field(default=True)


class Config(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    oeis: OEISSettings = Field(default_factory=OEISSettings)
    http: HTTPSettings = Field(default_factory=HTTPSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLISettings = Field(default_factory=CLISettings)

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        cli_overrides: Mapping[str, Any] | None = None,
    ) -> Config:
        """Merge defaults, the YAML file, environment variables and CLI overrides."""

        environ = os.environ if environ is None else environ
        merged = deepcopy(cls().model_dump(mode="json"))

        if path is not None:
            config_path = Path(path)
            if not config_path.exists():
                msg = f"Config file not found: {config_path}"
                raise ConfigError(msg)
            merged = _deep_update(merged, cls._load_yaml(config_path))

        cli_section = merged.get("cli", {})
        if cli_section.get("allow_env_override", True):
            prefix = cli_section.get("env_prefix", ENV_PREFIX_FALLBACK)
            merged = _deep_update(merged, cls._extract_env_overrides(environ, prefix))

        if cli_overrides:
            merged = _deep_update(merged, cls._normalise_cli_overrides(cli_overrides))

        try:
            return cls.model_validate(merged)
        except ValidationError as exc:
            msg = f"Invalid configuration: {exc}"
            raise ConfigError(msg) from exc

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as file:
                data = yaml.safe_load(file) or {}
        except yaml.YAMLError as exc:
            msg = f"Could not parse {path}: {exc}"
            raise ConfigError(msg) from exc
        if not isinstance(data, Mapping):
            msg = "Configuration file must contain a mapping"
            raise ConfigError(msg)
        return dict(data)

    @classmethod
    def _extract_env_overrides(
        cls, environ: Mapping[str, str], prefix: str
    ) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        if not prefix:
            return overrides
        prefix_with_sep = f"{prefix}{ENV_SEPARATOR}"
        for key, value in environ.items():
            if not key.startswith(prefix_with_sep):
                continue
            path = key[len(prefix_with_sep) :].split(ENV_SEPARATOR)
            normalised_path = [part.lower() for part in path if part]
            if not normalised_path:
                continue
            overrides = _deep_update(
                overrides,
                _build_nested(normalised_path, _coerce_value(value)),
            )
        return overrides

    @staticmethod
    def _normalise_cli_overrides(overrides: Mapping[str, Any]) -> dict[str, Any]:
        normalised: dict[str, Any] = {}
        for key, value in overrides.items():
            path = [part.strip() for part in str(key).split(".") if part.strip()]
            coerced = _coerce_value(value) if isinstance(value, str) else value
            normalised = _deep_update(normalised, _build_nested(path, coerced))
        return normalised

    @staticmethod
    def parse_cli_overrides(pairs: Iterable[str]) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for pair in pairs:
            if "=" not in pair:
                msg = "Overrides must use KEY=VALUE syntax"
                raise ConfigError(msg)
            key, raw_value = pair.split("=", 1)
            path = [part.strip() for part in key.split(".") if part.strip()]
            overrides = _deep_update(
                overrides,
                _build_nested(path, _coerce_value(raw_value)),
            )
        return overrides


__all__ = [
    "CLISettings",
    "Config",
    "HTTPSettings",
    "LoggingSettings",
    "OEISSettings",
]
