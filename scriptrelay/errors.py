"""Exceptions raised by scriptrelay operations.

Every failure aborts the enclosing build step, so nothing here is caught
inside the package. Each error carries the path or variable name a build
operator needs to diagnose it.
"""

from __future__ import annotations

from pathlib import Path


class ScriptRelayError(RuntimeError):
    """Base class for all scriptrelay failures."""


class ConfigError(ScriptRelayError):
    """Raised when the configuration file cannot be parsed."""


class MissingEnvironmentVariableError(ScriptRelayError):
    """A required build environment variable is not set."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} not set")
        self.variable = variable


class PathResolutionError(ScriptRelayError):
    """A script path could not be canonicalized."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to canonicalize global API script path {path}: {reason}")
        self.path = path


class PathOutsideBaseError(ScriptRelayError):
    """A canonical script path does not live under the output base."""

    def __init__(self, path: Path, base: Path) -> None:
        super().__init__(
            f"global API script {path} is not located under the output base {base}"
        )
        self.path = path
        self.base = base


class EncodingError(ScriptRelayError):
    """The manifest entries could not be serialised."""


class ManifestDecodeError(ScriptRelayError):
    """A manifest file exists but does not hold a JSON array of strings."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to parse plugin global API script paths in {path}: {reason}")
        self.path = path


class ScriptIOError(ScriptRelayError):
    """Reading or writing a manifest or script file failed."""

    def __init__(self, path: Path, message: str, error: Exception) -> None:
        super().__init__(f"{message} {path}: {error}")
        self.path = path
        self.error = error


__all__ = [
    "ConfigError",
    "EncodingError",
    "ManifestDecodeError",
    "MissingEnvironmentVariableError",
    "PathOutsideBaseError",
    "PathResolutionError",
    "ScriptIOError",
    "ScriptRelayError",
]
