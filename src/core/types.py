"""Shared typed models.

This module defines the immutable UDF descriptor passed from the
reading and encoding stages to the SQL renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_INPUT_TYPES, DEFAULT_RETURN_TYPE


@dataclass(frozen=True)
class UdfDescriptor:
    """Everything needed to render one ``CREATE FUNCTION`` statement.

    Attributes:
        udf_name: Name the function is registered under.
        b64wasm: Base64 text of the compiled WebAssembly module.
        wasm_export_name: Exported symbol to invoke, or None to use udf_name.
        input_types: Ordered SQL argument type names.
        return_type: SQL return type name.
    """

    udf_name: str
    b64wasm: str
    wasm_export_name: str | None = None
    input_types: tuple[str, ...] = DEFAULT_INPUT_TYPES
    return_type: str = DEFAULT_RETURN_TYPE

    @property
    def entrypoint(self) -> str:
        """Return the export symbol the engine should call."""
        if self.wasm_export_name is None:
            return self.udf_name
        return self.wasm_export_name
