"""Core data models shared across scriptrelay components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .constants import DIRECTIVE_TEMPLATE


@dataclass(frozen=True)
class Directive:
    """Key/value datum a provider hands to the orchestrator for its dependents."""

    key: str
    value: str

    def render(self) -> str:
        return DIRECTIVE_TEMPLATE.format(key=self.key, value=self.value)


@dataclass
class Manifest:
    """Ordered list of base-relative script paths persisted by the aggregator."""

    entries: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


__all__ = ["Directive", "Manifest"]
