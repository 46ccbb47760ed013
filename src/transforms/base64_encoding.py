"""Base64 text encoding for module payloads.

Uses the RFC 4648 standard alphabet with ``=`` padding, which is what
the database engine decodes from the ``data`` field.
"""

from __future__ import annotations

import base64
import binascii

from core.errors import UdfGenEncodingError


def encode_base64(payload: bytes) -> str:
    """Encode bytes as padded standard base64 text.

    Args:
        payload: Arbitrary bytes, including empty.

    Returns:
        ASCII base64 string; empty for empty input.
    """
    return base64.b64encode(payload).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode padded standard base64 text.

    Args:
        text: Base64 string produced by ``encode_base64``.

    Returns:
        Decoded bytes.

    Raises:
        UdfGenEncodingError: If text is not valid standard base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as error:
        raise UdfGenEncodingError(
            f"Invalid base64 payload of length {len(text)}: {error}."
        ) from error
