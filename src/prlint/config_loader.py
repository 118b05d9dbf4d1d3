# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration loading from defaults, ``pyproject.toml`` and ``.prlint.toml``."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, MutableMapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .config import Config, ConfigError

LOGGER = logging.getLogger(__name__)

PROJECT_CONFIG_NAME: Final[str] = ".prlint.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "prlint"


class ConfigSource(Protocol):
    """Provide one layer of configuration data."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the configuration fragment supplied by this source."""

        raise NotImplementedError


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Config().to_dict()


class TomlConfigSource:
    """Load configuration data from a TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        """Return the parsed document, or an empty mapping when the file is absent.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML.
        """

        if not self._path.exists():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {self._path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"unable to read {self._path}: {exc}") from exc
        return _resolve_config_files(data, self._path.parent)


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.prlint]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(cls, project_root: Path) -> ConfigLoader:
        """Build a loader reading defaults, then ``pyproject.toml``, then ``.prlint.toml``."""

        root = project_root.resolve()
        return cls(
            [
                DefaultConfigSource(),
                PyProjectConfigSource(root / PYPROJECT_NAME),
                TomlConfigSource(root / PROJECT_CONFIG_NAME),
            ]
        )

    def load(self) -> Config:
        """Return the merged configuration.

        Raises:
            ConfigError: If a source is malformed or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            LOGGER.debug("applying configuration from %s", source.name)
            merged = _deep_merge(merged, fragment)
        try:
            return Config.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc


def load_config(project_root: Path) -> Config:
    """Load configuration for ``project_root`` using the default tiered sources."""
    return ConfigLoader.for_root(project_root).load()


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(current, value)
        else:
            result[key] = value
    return result


def _resolve_config_files(data: MutableMapping[str, Any], base_dir: Path) -> dict[str, Any]:
    """Anchor relative ``tools.<name>.config_file`` entries at the declaring file's directory."""

    document = dict(data)
    for section in _tool_tables(document):
        raw = section.get("config_file")
        if isinstance(raw, str) and raw and not Path(raw).is_absolute():
            section["config_file"] = str(base_dir / raw)
    return document


def _tool_tables(document: Mapping[str, Any]) -> list[MutableMapping[str, Any]]:
    candidates = [document.get("tools")]
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if isinstance(tool_section, Mapping):
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if isinstance(section, Mapping):
            candidates.append(section.get("tools"))
    tables: list[MutableMapping[str, Any]] = []
    for candidate in candidates:
        if isinstance(candidate, Mapping):
            tables.extend(entry for entry in candidate.values() if isinstance(entry, MutableMapping))
    return tables


__all__ = [
    "ConfigLoader",
    "ConfigSource",
    "DefaultConfigSource",
    "PROJECT_CONFIG_NAME",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "load_config",
]
