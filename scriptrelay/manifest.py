"""On-disk encoding of the global API script manifest."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import EncodingError, ManifestDecodeError, ScriptIOError
from .models import Manifest

# mkstemp creates files as 0600; the manifest gets the mode a plain open() would.
_DEFAULT_FILE_MODE = 0o666


def encode_manifest(entries: Sequence[str]) -> str:
    try:
        return json.dumps(list(entries), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to serialize global API script paths: {exc}") from exc


def decode_manifest(text: str, *, source: Path) -> Manifest:
    """Parse manifest text; anything but a JSON array of strings is rejected."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestDecodeError(source, str(exc)) from exc
    if not isinstance(data, list):
        raise ManifestDecodeError(source, f"expected an array, found {type(data).__name__}")
    entries: List[str] = []
    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise ManifestDecodeError(
                source, f"entry {index} is {type(item).__name__}, expected a string"
            )
        entries.append(item)
    return Manifest(entries=entries)


def write_manifest(path: Path, manifest: Manifest) -> None:
    """Replace ``path`` with the encoded manifest, atomically.

    The payload goes to a temporary file in the same directory and is moved
    into place, so readers see either the previous manifest or the new one.
    """
    payload = encode_manifest(manifest.entries).encode("utf-8")
    temp_name: Optional[str] = None
    try:
        fd, temp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as handle:
            os.chmod(temp_name, _DEFAULT_FILE_MODE & ~_current_umask())
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, path)
        temp_name = None
    except OSError as exc:
        raise ScriptIOError(path, "failed to write global API script paths to", exc) from exc
    finally:
        if temp_name is not None:
            Path(temp_name).unlink(missing_ok=True)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def read_manifest(path: Path) -> Optional[Manifest]:
    """Return the manifest at ``path`` or ``None`` when no file exists."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as exc:
        raise ManifestDecodeError(path, str(exc)) from exc
    except OSError as exc:
        raise ScriptIOError(path, "failed to read plugin global API script paths from", exc) from exc
    return decode_manifest(text, source=path)


__all__ = ["decode_manifest", "encode_manifest", "read_manifest", "write_manifest"]
