"""Unit tests for the WebAssembly file reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import UdfGenInputError
from ingest.wasm_reader import read_wasm_bytes
from tests.fixture_paths import fixture_path


def test_read_wasm_bytes_returns_exact_contents() -> None:
    """Reader should return raw bytes without decoding."""
    payload = read_wasm_bytes(fixture_path("wasm/magic_prefix.wasm"))

    assert payload == b"\x00asm"


def test_read_wasm_bytes_accepts_string_path(tmp_path: Path) -> None:
    """Reader should accept plain string paths."""
    module_path = tmp_path / "module.wasm"
    module_path.write_bytes(bytes(range(256)))

    payload = read_wasm_bytes(str(module_path))

    assert payload == bytes(range(256))


def test_read_wasm_bytes_returns_empty_for_empty_file() -> None:
    """Reader should not treat an empty module as an error."""
    assert read_wasm_bytes(fixture_path("wasm/empty.wasm")) == b""


def test_read_wasm_bytes_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should chain the OS error for a missing file."""
    missing_path = tmp_path / "does-not-exist.wasm"

    with pytest.raises(UdfGenInputError) as error_info:
        read_wasm_bytes(missing_path)

    assert isinstance(error_info.value.__cause__, FileNotFoundError)


def test_read_wasm_bytes_raises_for_directory(tmp_path: Path) -> None:
    """Reader should fail when the path is a directory."""
    with pytest.raises(UdfGenInputError):
        read_wasm_bytes(tmp_path)


def test_read_wasm_bytes_raises_when_path_absent() -> None:
    """Reader should fail when no path was supplied at all."""
    with pytest.raises(UdfGenInputError, match="no file path"):
        read_wasm_bytes(None)
