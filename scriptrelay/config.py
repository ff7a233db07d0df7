"""Configuration loading for scriptrelay (.scriptrelay.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    DEPENDENCY_PREFIX,
    FRAMEWORK_LINKS,
    GLOBAL_API_SCRIPT_FILE_LIST_PATH,
    GLOBAL_API_SCRIPT_PATH_KEY,
    OUTPUT_BASE_VAR,
    SOURCE_ROOT_VAR,
)
from .errors import ConfigError

CONFIG_FILENAME = ".scriptrelay.yml"


@dataclass(frozen=True)
class RelayConfig:
    """Names agreed between providers, dependents and the orchestrator."""

    output_base_var: str = OUTPUT_BASE_VAR
    source_root_var: str = SOURCE_ROOT_VAR
    path_key: str = GLOBAL_API_SCRIPT_PATH_KEY
    dependency_prefix: str = DEPENDENCY_PREFIX
    framework_links: str = FRAMEWORK_LINKS
    manifest_name: str = GLOBAL_API_SCRIPT_FILE_LIST_PATH
    sort_by_key: bool = False

    @property
    def framework_key(self) -> str:
        """Variable the framework's own build step is seen under by dependents."""
        return f"{self.dependency_prefix}{self.framework_links}_{self.path_key}"

    def matches_dependency_key(self, key: str) -> bool:
        return key.startswith(self.dependency_prefix) and key.endswith(self.path_key)


def load_config(config_path: Path) -> RelayConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        return RelayConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = RelayConfig()
    sort_by_key = _as_bool(data.get("sort_by_key"))
    return RelayConfig(
        output_base_var=_as_str(data.get("output_base_var")) or defaults.output_base_var,
        source_root_var=_as_str(data.get("source_root_var")) or defaults.source_root_var,
        path_key=_as_str(data.get("path_key")) or defaults.path_key,
        dependency_prefix=_as_str(data.get("dependency_prefix")) or defaults.dependency_prefix,
        framework_links=_as_str(data.get("framework_links")) or defaults.framework_links,
        manifest_name=_as_str(data.get("manifest_name")) or defaults.manifest_name,
        sort_by_key=defaults.sort_by_key if sort_by_key is None else sort_by_key,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "RelayConfig", "load_config"]
