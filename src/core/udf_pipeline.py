"""Read, encode, and render pipeline.

This module composes the file reader, base64 encoder, and SQL renderer
into the single flow used by the CLI and the public SDK.
"""

from __future__ import annotations

from pathlib import Path

from core.logging_config import get_logger
from core.types import UdfDescriptor
from ingest.wasm_reader import read_wasm_bytes
from render.create_function_sql import render_create_function_sql
from transforms.base64_encoding import encode_base64


def build_udf_descriptor(
    udf_name: str,
    wasm_filename: str | Path | None,
    wasm_export_name: str | None = None,
) -> UdfDescriptor:
    """Read and encode a WebAssembly module into a descriptor.

    Args:
        udf_name: Function name to register.
        wasm_filename: Path to the compiled module.
        wasm_export_name: Optional export symbol override.

    Returns:
        Descriptor with the fixed BIGINT signature.

    Raises:
        UdfGenInputError: If the module file cannot be read.
    """
    payload = read_wasm_bytes(wasm_filename)
    descriptor = UdfDescriptor(
        udf_name=udf_name,
        b64wasm=encode_base64(payload),
        wasm_export_name=wasm_export_name,
    )
    get_logger(__name__).debug(
        "udf_descriptor_built",
        udf_name=descriptor.udf_name,
        entrypoint=descriptor.entrypoint,
        encoded_length=len(descriptor.b64wasm),
    )
    return descriptor


def generate_create_function_sql(
    udf_name: str,
    wasm_filename: str | Path | None,
    wasm_export_name: str | None = None,
) -> str:
    """Build the ``CREATE FUNCTION`` statement for a module file.

    Args:
        udf_name: Function name to register.
        wasm_filename: Path to the compiled module.
        wasm_export_name: Optional export symbol override.

    Returns:
        Rendered SQL statement.
    """
    descriptor = build_udf_descriptor(udf_name, wasm_filename, wasm_export_name)
    return render_create_function_sql(descriptor)
