"""``CREATE FUNCTION`` statement renderer.

Values are substituted verbatim. Quotes or newlines inside the UDF name,
export name, or payload are not escaped and will break the statement.
"""

from __future__ import annotations

from core.constants import UDF_LANGUAGE
from core.types import UdfDescriptor

_CREATE_FUNCTION_TEMPLATE = """CREATE FUNCTION {udf_name} AS '
{{
  "entrypoint": "{entrypoint}",
  "language": "{language}",
  "input_types": [{input_types}],
  "return_type": "{return_type}",
  "data": "{b64wasm}"
}}';"""


def render_create_function_sql(descriptor: UdfDescriptor) -> str:
    """Render the registration statement for a UDF descriptor.

    Args:
        descriptor: Function name, signature, entrypoint, and payload.

    Returns:
        SQL text without a trailing newline.
    """
    return _CREATE_FUNCTION_TEMPLATE.format(
        udf_name=descriptor.udf_name,
        entrypoint=descriptor.entrypoint,
        language=UDF_LANGUAGE,
        input_types=_render_type_list(descriptor.input_types),
        return_type=descriptor.return_type,
        b64wasm=descriptor.b64wasm,
    )


def _render_type_list(type_names: tuple[str, ...]) -> str:
    return ", ".join(f'"{type_name}"' for type_name in type_names)
