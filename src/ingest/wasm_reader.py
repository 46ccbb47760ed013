"""WebAssembly module file reader.

This module loads compiled module bytes from local storage.
Read failures surface as typed input errors with the OS cause chained.
"""

from __future__ import annotations

from pathlib import Path

from core.errors import UdfGenInputError
from core.logging_config import get_logger


def read_wasm_bytes(wasm_filename: str | Path | None) -> bytes:
    """Read the complete contents of a module file.

    Args:
        wasm_filename: Local path to the compiled module.

    Returns:
        Raw file bytes, possibly empty.

    Raises:
        UdfGenInputError: If the path is missing or unreadable.
    """
    if wasm_filename is None:
        raise UdfGenInputError(
            "Failed to read WebAssembly module: no file path was given. "
            "Pass the module path as the third argument."
        )
    wasm_path = Path(wasm_filename).expanduser()
    try:
        payload = wasm_path.read_bytes()
    except OSError as error:
        raise UdfGenInputError(
            f"Failed to read WebAssembly module at {wasm_path}: {error.strerror or error}. "
            "Provide an existing, readable file."
        ) from error
    get_logger(__name__).info("wasm_read", path=str(wasm_path), byte_count=len(payload))
    return payload
