"""Explicit build context threaded through publish, aggregate and read."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .config import RelayConfig
from .errors import MissingEnvironmentVariableError


@dataclass(frozen=True)
class BuildContext:
    """Snapshot of what the orchestrator provides to one build step.

    ``env`` is the inherited variable mapping; ``output_base`` and
    ``source_root`` are taken from it unless given explicitly.
    """

    env: Mapping[str, str] = field(default_factory=dict)
    output_base: Optional[Path] = None
    source_root: Optional[Path] = None
    config: RelayConfig = field(default_factory=RelayConfig)

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        config: RelayConfig | None = None,
    ) -> "BuildContext":
        """Build a context from ``env`` (a copy of ``os.environ`` when omitted)."""
        config = config or RelayConfig()
        snapshot = dict(os.environ if env is None else env)
        output_base = snapshot.get(config.output_base_var)
        source_root = snapshot.get(config.source_root_var)
        return cls(
            env=snapshot,
            output_base=Path(output_base) if output_base else None,
            source_root=Path(source_root) if source_root else None,
            config=config,
        )

    def require_output_base(self) -> Path:
        if self.output_base is None:
            raise MissingEnvironmentVariableError(self.config.output_base_var)
        return self.output_base

    def require_source_root(self) -> Path:
        if self.source_root is None:
            raise MissingEnvironmentVariableError(self.config.source_root_var)
        return self.source_root


__all__ = ["BuildContext"]
