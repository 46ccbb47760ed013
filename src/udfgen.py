"""Public SDK surface for udfgen.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed models.
"""

from __future__ import annotations

from core.config import UdfGenConfig
from core.errors import UdfGenConfigError, UdfGenEncodingError, UdfGenError, UdfGenInputError
from core.types import UdfDescriptor
from core.udf_pipeline import build_udf_descriptor, generate_create_function_sql
from ingest.wasm_reader import read_wasm_bytes
from render.create_function_sql import render_create_function_sql
from transforms.base64_encoding import decode_base64, encode_base64

__all__ = [
    "UdfDescriptor",
    "UdfGenConfig",
    "UdfGenConfigError",
    "UdfGenEncodingError",
    "UdfGenError",
    "UdfGenInputError",
    "build_udf_descriptor",
    "decode_base64",
    "encode_base64",
    "generate_create_function_sql",
    "read_wasm_bytes",
    "render_create_function_sql",
]
