"""Propagate plugin global API script paths from providers to dependents."""

from .aggregator import aggregate
from .channel import (
    CargoChannel,
    DirectiveChannel,
    MemoryChannel,
    dependent_env_key,
    dependent_environment,
)
from .config import RelayConfig, load_config
from .constants import GLOBAL_API_SCRIPT_FILE_LIST_PATH, GLOBAL_API_SCRIPT_PATH_KEY
from .context import BuildContext
from .errors import (
    ConfigError,
    EncodingError,
    ManifestDecodeError,
    MissingEnvironmentVariableError,
    PathOutsideBaseError,
    PathResolutionError,
    ScriptIOError,
    ScriptRelayError,
)
from .models import Directive, Manifest
from .publisher import publish
from .reader import load_manifest, read_all

__all__ = [
    "BuildContext",
    "CargoChannel",
    "ConfigError",
    "Directive",
    "DirectiveChannel",
    "EncodingError",
    "GLOBAL_API_SCRIPT_FILE_LIST_PATH",
    "GLOBAL_API_SCRIPT_PATH_KEY",
    "Manifest",
    "ManifestDecodeError",
    "MemoryChannel",
    "MissingEnvironmentVariableError",
    "PathOutsideBaseError",
    "PathResolutionError",
    "RelayConfig",
    "ScriptIOError",
    "ScriptRelayError",
    "aggregate",
    "dependent_env_key",
    "dependent_environment",
    "load_config",
    "load_manifest",
    "publish",
    "read_all",
]
