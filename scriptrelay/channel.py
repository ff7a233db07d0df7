"""Directive side channel between provider and dependent build steps.

Providers emit ``cargo:KEY=VALUE`` lines; the orchestrator re-exposes each
one to dependents as ``DEP_<LINKS>_<KEY>=VALUE``, where ``LINKS`` is the
provider's namespace. Dependents find published paths by matching the
``DEP_`` prefix and the key suffix.
"""

from __future__ import annotations

import sys
from typing import Dict, Iterable, List, Mapping, Protocol, TextIO

from .constants import DEPENDENCY_PREFIX
from .models import Directive


class DirectiveChannel(Protocol):
    """Destination for directives emitted by a build step."""

    def emit(self, directive: Directive) -> None:  # pragma: no cover - protocol
        ...


class CargoChannel:
    """Writes directives to the build script's stdout for the orchestrator."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, directive: Directive) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(directive.render(), file=stream, flush=True)


class MemoryChannel:
    """Collects directives in memory for in-process builds and tests."""

    def __init__(self) -> None:
        self.directives: List[Directive] = []

    def emit(self, directive: Directive) -> None:
        self.directives.append(directive)


def dependent_env_key(links: str, key: str, *, prefix: str = DEPENDENCY_PREFIX) -> str:
    """Return the variable name dependents see for ``key`` published by ``links``."""
    namespace = links.upper().replace("-", "_")
    return f"{prefix}{namespace}_{key.upper()}"


def dependent_environment(
    published: Mapping[str, Iterable[Directive]],
    *,
    prefix: str = DEPENDENCY_PREFIX,
) -> Dict[str, str]:
    """Build the variables a dependent inherits from each provider's directives.

    ``published`` maps a provider's links name to the directives it emitted.
    A later directive with the same key overwrites an earlier one.
    """
    env: Dict[str, str] = {}
    for links, directives in published.items():
        for directive in directives:
            env[dependent_env_key(links, directive.key, prefix=prefix)] = directive.value
    return env


__all__ = [
    "CargoChannel",
    "DirectiveChannel",
    "MemoryChannel",
    "dependent_env_key",
    "dependent_environment",
]
