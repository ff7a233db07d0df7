"""Well-known names shared by providers and dependents."""

from __future__ import annotations

# Key a provider publishes its script path under. The orchestrator prefixes it
# per provider before handing it to dependents.
GLOBAL_API_SCRIPT_PATH_KEY = "GLOBAL_API_SCRIPT_PATH"

# File in a dependent's output directory holding the JSON list of script paths.
GLOBAL_API_SCRIPT_FILE_LIST_PATH = "__global-api-script.js"

OUTPUT_BASE_VAR = "BAZEL_OUTPUT_BASE"
SOURCE_ROOT_VAR = "CARGO_MANIFEST_DIR"

DEPENDENCY_PREFIX = "DEP_"
FRAMEWORK_LINKS = "TAURI"

DIRECTIVE_TEMPLATE = "cargo:{key}={value}"

__all__ = [
    "DEPENDENCY_PREFIX",
    "DIRECTIVE_TEMPLATE",
    "FRAMEWORK_LINKS",
    "GLOBAL_API_SCRIPT_FILE_LIST_PATH",
    "GLOBAL_API_SCRIPT_PATH_KEY",
    "OUTPUT_BASE_VAR",
    "SOURCE_ROOT_VAR",
]
