import json
from collections.abc import Mapping
from typing import Any

from gql2jsonschema import log

from .models import IntrospectionQuery, Options
from .transformer import IntrospectionTransformer


def from_introspection_query(
    introspection: IntrospectionQuery | Mapping[str, Any],
    options: Options | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Convert a GraphQL introspection result to a JSON Schema document.

    Args:
        introspection: The introspection result (the `data` payload, holding `__schema`)
        options: Conversion options, as an Options instance or a mapping of option names

    Returns:
        dict[str, Any]: A new JSON Schema document

    Raises:
        pydantic.ValidationError: If the options are invalid, e.g. an unknown `idTypeMapping`
    """
    if not isinstance(introspection, IntrospectionQuery):
        introspection = IntrospectionQuery.model_validate(introspection)
    if options is None:
        options = Options()
    elif not isinstance(options, Options):
        options = Options.model_validate(options)

    log.info(f"Converting introspection result with {len(introspection.schema_.types or [])} types")

    transformer = IntrospectionTransformer(introspection, options)
    return transformer.transform()


def translate_to_jsonschema(
    introspection: IntrospectionQuery | Mapping[str, Any],
    options: Options | Mapping[str, Any] | None = None,
) -> str:
    """
    Translate a GraphQL introspection result to a JSON Schema string.

    Args:
        introspection: The introspection result (the `data` payload, holding `__schema`)
        options: Conversion options

    Returns:
        str: JSON Schema representation as an indented JSON string
    """
    json_schema = from_introspection_query(introspection, options)
    return json.dumps(json_schema, indent=2)
