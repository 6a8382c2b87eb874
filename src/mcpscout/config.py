"""Scan configuration.

A scan is driven by a ``ScanConfig``: which acquisition mode to use, the
local path or repository URL, and a few tuning knobs. Configurations come
from CLI options, from a YAML file, or from both (CLI options win)::

    mode: remote
    repository-url: https://github.com/example/weather-mcp.git
    clone-timeout: 60
    max-workers: 8
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from mcpscout.acquisition import DEFAULT_CLONE_TIMEOUT
from mcpscout.exceptions import ConfigError


class SourceMode(str, Enum):
    """Where the scanned source tree comes from."""

    LOCAL = "local"
    REMOTE = "remote"
    BARE = "bare"

    @classmethod
    def parse(cls, value: str | SourceMode) -> SourceMode:
        """Parse a mode name, accepting the upstream ``github``/``bare-bones`` aliases."""
        if isinstance(value, SourceMode):
            return value
        key = str(value).strip().lower()
        key = _MODE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigError(f"Unknown source mode {value!r} (expected one of: {choices})") from None


_MODE_ALIASES: dict[str, str] = {
    "github": "remote",
    "git": "remote",
    "bare-bones": "bare",
    "none": "bare",
}


@dataclass(frozen=True)
class ScanConfig:
    """Settings for one inventory scan.

    Attributes:
        mode: Acquisition mode.
        source_path: Root directory for ``local`` mode.
        repository_url: Repository to clone for ``remote`` mode.
        clone_timeout: Seconds before a clone is abandoned.
        clone_depth: Shallow clone depth; None clones full history.
        max_workers: Threads used to read and extract files.
    """

    mode: SourceMode = SourceMode.LOCAL
    source_path: Path | None = None
    repository_url: str | None = None
    clone_timeout: float = DEFAULT_CLONE_TIMEOUT
    clone_depth: int | None = 1
    max_workers: int = 4

    def validate(self) -> ScanConfig:
        """Check the settings required by ``mode``.

        Returns:
            ``self``, so calls can be chained.

        Raises:
            ConfigError: On missing or out-of-range settings.
        """
        if self.mode is SourceMode.LOCAL and self.source_path is None:
            raise ConfigError("local mode requires a source path")
        if self.mode is SourceMode.REMOTE and not self.repository_url:
            raise ConfigError("remote mode requires a repository URL")
        if self.clone_timeout <= 0:
            raise ConfigError("clone_timeout must be positive")
        if self.clone_depth is not None and self.clone_depth < 1:
            raise ConfigError("clone_depth must be at least 1")
        if self.max_workers < 1:
            raise ConfigError("max_workers must be at least 1")
        return self

    def merged(self, **overrides: Any) -> ScanConfig:
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "mode" in values:
            values["mode"] = SourceMode.parse(values["mode"])
        if "source_path" in values:
            values["source_path"] = Path(values["source_path"])
        return replace(self, **values)


_FIELD_NAMES = frozenset(f.name for f in fields(ScanConfig))


def config_from_mapping(data: dict[str, Any]) -> ScanConfig:
    """Build a ``ScanConfig`` from a plain mapping (e.g. parsed YAML).

    Keys may use hyphens or underscores.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.
    """
    values: dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).replace("-", "_")
        if key not in _FIELD_NAMES:
            raise ConfigError(f"Unknown configuration key: {raw_key}")
        values[key] = value
    for key in ("source_path", "repository_url"):
        if values.get(key) is not None and not isinstance(values[key], str):
            raise ConfigError(
                f"Invalid configuration value: {key} must be a string, "
                f"not {type(values[key]).__name__}"
            )
    try:
        if "clone_timeout" in values:
            values["clone_timeout"] = float(values["clone_timeout"])
        if values.get("clone_depth") is not None:
            values["clone_depth"] = int(values["clone_depth"])
        if "max_workers" in values:
            values["max_workers"] = int(values["max_workers"])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration value: {exc}") from exc
    mode = values.pop("mode", SourceMode.LOCAL)
    config = ScanConfig().merged(mode=mode, **values)
    if "clone_depth" in values and values["clone_depth"] is None:
        # An explicit null asks for full history.
        config = replace(config, clone_depth=None)
    return config


def load_config(path: Path | str) -> ScanConfig:
    """Load a ``ScanConfig`` from a YAML file.

    Relative ``source-path`` values are resolved against the file's
    directory. The result is not validated; CLI overrides may still be
    applied before calling ``validate()``.

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    config_path = Path(path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in {config_path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    config = config_from_mapping(data)
    if config.source_path is not None and not config.source_path.is_absolute():
        config = replace(config, source_path=config_path.parent / config.source_path)
    return config
