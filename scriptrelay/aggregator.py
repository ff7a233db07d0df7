"""Dependent side: collect every published script path into a manifest."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from .context import BuildContext
from .logging import get_logger
from .manifest import write_manifest
from .models import Manifest
from .paths import canonicalize, relativize

_LOGGER = get_logger("aggregator")


def aggregate(
    out_dir: Path | str,
    context: BuildContext,
    override: Path | str | None = None,
    *,
    sort_by_key: bool | None = None,
) -> Manifest:
    """Write the ordered list of published script paths into ``out_dir``.

    ``override`` is only needed by builds that skip the framework's own
    build step; the framework's directive, when present, takes its place.
    The override always comes first. Other entries keep the iteration order
    of ``context.env`` unless ``sort_by_key`` (or ``config.sort_by_key``)
    asks for them to be ordered by variable name.
    """
    config = context.config
    override_entry: Optional[str] = (
        _override_entry(override, context) if override is not None else None
    )

    collected: List[Tuple[str, str]] = []
    for key, value in context.env.items():
        if key == config.framework_key:
            _LOGGER.debug("Framework global API script %s from %s", value, key)
            override_entry = value
        elif config.matches_dependency_key(key):
            _LOGGER.debug("Found global API script %s from %s", value, key)
            collected.append((key, value))

    if config.sort_by_key if sort_by_key is None else sort_by_key:
        collected.sort(key=lambda item: item[0])

    entries = [value for _, value in collected]
    if override_entry is not None:
        entries.insert(0, override_entry)

    manifest = Manifest(entries=entries)
    target = Path(out_dir) / config.manifest_name
    write_manifest(target, manifest)
    _LOGGER.info("Wrote %d global API script path(s) to %s", len(entries), target)
    return manifest


def _override_entry(override: Path | str, context: BuildContext) -> str:
    path = Path(override)
    if not path.is_absolute():
        return path.as_posix()
    return relativize(canonicalize(path), context.require_output_base())


__all__ = ["aggregate"]
