"""Provider side: announce the location of a plugin's global API script."""

from __future__ import annotations

from pathlib import Path

from .channel import CargoChannel, DirectiveChannel
from .context import BuildContext
from .logging import get_logger
from .models import Directive
from .paths import canonicalize, relativize

_LOGGER = get_logger("publisher")


def publish(
    path: Path | str,
    context: BuildContext,
    channel: DirectiveChannel | None = None,
) -> Directive:
    """Publish ``path`` to dependents as a path relative to the output base.

    Relative paths are taken from the provider's source root. The path is
    canonicalized first so that a symlink into the sandbox, or a path from a
    stale checkout, never reaches a dependent. Nothing is emitted unless every
    step succeeds.
    """
    script_path = Path(path)
    output_base = context.require_output_base()
    if not script_path.is_absolute():
        script_path = context.require_source_root() / script_path

    canonical = canonicalize(script_path)
    relative = relativize(canonical, output_base)

    directive = Directive(key=context.config.path_key, value=relative)
    (channel or CargoChannel()).emit(directive)
    _LOGGER.info("Published global API script %s", relative)
    return directive


__all__ = ["publish"]
