"""udfgen CLI entry point.

This module maps three positional arguments onto the read, encode,
and render pipeline and prints the resulting SQL statement.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from core.config import UdfGenConfig
from core.constants import DEFAULT_LOG_LEVEL
from core.errors import UdfGenConfigError
from core.logging_config import configure_logging, get_logger
from core.udf_pipeline import generate_create_function_sql


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="udfgen",
        description="Print a CREATE FUNCTION statement for a WebAssembly UDF",
    )
    parser.add_argument("udf_name", help="Function name to register")
    parser.add_argument(
        "wasm_export_name",
        help="Exported symbol to call; pass an empty string to use udf_name",
    )
    parser.add_argument("wasm_filename", nargs="?", help="Compiled .wasm module path")
    parser.add_argument("extra_args", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the udfgen CLI.

    Every argument is taken as a positional value, including ones that
    start with ``-``. Arguments past the third are ignored.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.

    Raises:
        UdfGenInputError: If the module file cannot be read.
    """
    raw_args = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(["--", *raw_args])
    _configure_logging_from_env()
    sql = generate_create_function_sql(
        udf_name=args.udf_name,
        wasm_filename=args.wasm_filename,
        wasm_export_name=_optional_export_name(args.wasm_export_name),
    )
    print(sql)
    return 0


def _configure_logging_from_env() -> None:
    """Apply the env log level, keeping the default when it is invalid."""
    try:
        config = UdfGenConfig.from_env()
    except UdfGenConfigError as error:
        configure_logging(DEFAULT_LOG_LEVEL)
        get_logger(__name__).warning("log_level_ignored", reason=str(error))
        return
    configure_logging(config.log_level)


def _optional_export_name(raw_value: str) -> str | None:
    """Map an empty export-name argument to no override."""
    return raw_value or None
