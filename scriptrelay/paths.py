"""Path canonicalization and output-base relativization."""

from __future__ import annotations

from pathlib import Path, PurePath

from .errors import PathOutsideBaseError, PathResolutionError

_VERBATIM_UNC_PREFIX = "\\\\?\\UNC\\"
_VERBATIM_PREFIX = "\\\\?\\"


def canonicalize(path: Path) -> Path:
    """Resolve symlinks and normalise ``path``; the file must exist."""
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(path, str(exc)) from exc
    return clean_canonical_path(resolved)


def clean_canonical_path(path: Path) -> Path:
    """Drop the Windows verbatim prefix some resolvers add to absolute paths."""
    text = str(path)
    if text.startswith(_VERBATIM_UNC_PREFIX):
        return Path("\\\\" + text[len(_VERBATIM_UNC_PREFIX):])
    if text.startswith(_VERBATIM_PREFIX):
        return Path(text[len(_VERBATIM_PREFIX):])
    return path


def relativize(path: Path, base: Path) -> str:
    """Return ``path`` relative to ``base`` using forward slashes.

    ``base`` is resolved (non-strict) so a symlinked output base compares
    equal to canonical asset paths.
    """
    canonical_base = clean_canonical_path(base.resolve())
    try:
        relative = path.relative_to(canonical_base)
    except ValueError as exc:
        raise PathOutsideBaseError(path, canonical_base) from exc
    return PurePath(relative).as_posix()


__all__ = ["canonicalize", "clean_canonical_path", "relativize"]
