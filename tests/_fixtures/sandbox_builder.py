"""Helper utilities for laying out a sandboxed output base in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from scriptrelay import BuildContext
from scriptrelay.constants import OUTPUT_BASE_VAR, SOURCE_ROOT_VAR


class SandboxBuilder:
    """Writes provider files under a throwaway output base and builds contexts."""

    def __init__(self, tmp_path: Path) -> None:
        self.base = tmp_path / "output_base"
        self.base.mkdir()
        self.out_dir = tmp_path / "out"
        self.out_dir.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries below the output base."""
        for relative, content in files.items():
            path = self.base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def path(self, relative: str) -> Path:
        return self.base / relative

    def context(
        self,
        extra: Mapping[str, str] | None = None,
        *,
        source_root: str | None = None,
    ) -> BuildContext:
        """Return a context whose environment points at this sandbox."""
        env = {OUTPUT_BASE_VAR: str(self.base)}
        if source_root is not None:
            env[SOURCE_ROOT_VAR] = str(self.base / source_root)
        env.update(extra or {})
        return BuildContext.from_environment(env)


__all__ = ["SandboxBuilder"]
