from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.sandbox_builder import SandboxBuilder


@pytest.fixture
def sandbox(tmp_path: Path) -> SandboxBuilder:
    """Provide an output base and dependent out dir rooted at the pytest tmp_path."""
    return SandboxBuilder(tmp_path)
