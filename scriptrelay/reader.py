"""Read the aggregated global API scripts at compile time or runtime."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .config import RelayConfig
from .context import BuildContext
from .errors import ScriptIOError
from .logging import get_logger
from .manifest import read_manifest
from .models import Manifest

_LOGGER = get_logger("reader")


def load_manifest(out_dir: Path | str, config: RelayConfig | None = None) -> Optional[Manifest]:
    """Return the manifest stored in ``out_dir``, or ``None`` if there is none."""
    config = config or RelayConfig()
    path = Path(out_dir) / config.manifest_name
    manifest = read_manifest(path)
    if manifest is None:
        _LOGGER.debug("No global API script manifest at %s", path)
    return manifest


def read_all(out_dir: Path | str, context: BuildContext | None = None) -> Optional[List[str]]:
    """Return the text of every script listed in the manifest, in order.

    ``None`` means no manifest was written, which is normal for a dependent
    without plugin dependencies. Relative entries are resolved against the
    context's output base.
    """
    context = context or BuildContext.from_environment()
    manifest = load_manifest(out_dir, context.config)
    if manifest is None:
        return None

    scripts: List[str] = []
    for entry in manifest:
        path = Path(entry)
        if not path.is_absolute():
            path = context.require_output_base() / path
        try:
            scripts.append(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ScriptIOError(path, "failed to read plugin global API script", exc) from exc

    _LOGGER.debug("Loaded %d global API script(s)", len(scripts))
    return scripts


__all__ = ["load_manifest", "read_all"]
