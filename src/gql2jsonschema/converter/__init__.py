"""GraphQL introspection to JSON Schema converter."""

from .jsonschema import from_introspection_query, translate_to_jsonschema
from .models import IDTypeMapping, IntrospectionQuery, Options, is_valid_id_type_mapping
from .transformer import is_required, resolve_type_ref

__all__ = [
    "IDTypeMapping",
    "IntrospectionQuery",
    "Options",
    "from_introspection_query",
    "is_required",
    "is_valid_id_type_mapping",
    "resolve_type_ref",
    "translate_to_jsonschema",
]
