"""udfgen exception hierarchy.

Errors are split by pipeline stage: runtime config, reading the
module file, and decoding base64 payloads.
"""

from __future__ import annotations


class UdfGenError(Exception):
    """Base exception for all udfgen failures."""


class UdfGenConfigError(UdfGenError):
    """Raised for invalid runtime configuration."""


class UdfGenInputError(UdfGenError):
    """Raised when the WebAssembly input file cannot be read."""


class UdfGenEncodingError(UdfGenError):
    """Raised when base64 text cannot be decoded."""
