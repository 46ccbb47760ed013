"""Core constants used across udfgen modules.

This module centralizes the fixed UDF signature and runtime defaults.
Keeping values here avoids magic literals in rendering logic.
"""

from __future__ import annotations

UDF_LANGUAGE = "wasmMessagePack"
DEFAULT_INPUT_TYPES = ("BIGINT", "BIGINT")
DEFAULT_RETURN_TYPE = "BIGINT"
LOG_LEVEL_ENV_VAR = "UDFGEN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
