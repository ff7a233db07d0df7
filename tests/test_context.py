"""Tests for the explicit build context."""

from __future__ import annotations

from pathlib import Path

import pytest

from scriptrelay import BuildContext, MissingEnvironmentVariableError, RelayConfig


def test_from_environment_reads_configured_variables() -> None:
    context = BuildContext.from_environment(
        {"BAZEL_OUTPUT_BASE": "/sandbox/base", "CARGO_MANIFEST_DIR": "/sandbox/base/plugin"}
    )

    assert context.output_base == Path("/sandbox/base")
    assert context.source_root == Path("/sandbox/base/plugin")
    assert context.require_output_base() == Path("/sandbox/base")


def test_from_environment_honours_custom_variable_names() -> None:
    config = RelayConfig(output_base_var="BUILD_ROOT", source_root_var="PACKAGE_DIR")

    context = BuildContext.from_environment(
        {"BUILD_ROOT": "/root", "BAZEL_OUTPUT_BASE": "/ignored"}, config=config
    )

    assert context.output_base == Path("/root")
    with pytest.raises(MissingEnvironmentVariableError) as excinfo:
        context.require_source_root()
    assert excinfo.value.variable == "PACKAGE_DIR"


def test_empty_variable_counts_as_missing() -> None:
    context = BuildContext.from_environment({"BAZEL_OUTPUT_BASE": ""})

    with pytest.raises(MissingEnvironmentVariableError):
        context.require_output_base()


def test_from_environment_snapshots_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEP_X_GLOBAL_API_SCRIPT_PATH", "x.js")

    context = BuildContext.from_environment()
    monkeypatch.setenv("DEP_X_GLOBAL_API_SCRIPT_PATH", "changed.js")

    assert context.env["DEP_X_GLOBAL_API_SCRIPT_PATH"] == "x.js"
