from typing import Any

from gql2jsonschema.converter.models import DEFAULT_ID_TYPE_MAPPING, IDTypeMapping

ID_DESCRIPTION = (
    "The `ID` scalar type represents a unique identifier, often used to refetch an object or as key for a cache. "
    "The ID type appears in a JSON response as a String; however, it is not intended to be human-readable. "
    'When expected as an input type, any string (such as `"4"`) or integer (such as `4`) input value will be '
    "accepted as an ID."
)
STRING_DESCRIPTION = (
    "The `String` scalar type represents textual data, represented as UTF-8 character sequences. "
    "The String type is most often used by GraphQL to represent free-form human-readable text."
)
BOOLEAN_DESCRIPTION = "The `Boolean` scalar type represents `true` or `false`."

ID_TYPE_MAPPING_TO_JSON_SCHEMA: dict[IDTypeMapping, str | list[str]] = {
    IDTypeMapping.STRING: "string",
    IDTypeMapping.NUMBER: "number",
    IDTypeMapping.BOTH: ["string", "number"],
}

GRAPHQL_SCALAR_TO_JSON_SCHEMA: dict[str, dict[str, Any]] = {
    "String": {"type": "string", "description": STRING_DESCRIPTION},
    "Int": {"type": "number"},
    "Float": {"type": "number"},
    "Boolean": {"type": "boolean", "description": BOOLEAN_DESCRIPTION},
}


def map_scalar(name: str, id_type_mapping: IDTypeMapping = DEFAULT_ID_TYPE_MAPPING) -> dict[str, Any]:
    """
    Map a GraphQL scalar name to a JSON Schema node.

    Custom scalars have no JSON counterpart and become an untyped node that
    only carries the scalar name as its title.

    Args:
        name: The GraphQL scalar name
        id_type_mapping: How the `ID` scalar is typed

    Returns:
        dict[str, Any]: A new JSON Schema node
    """
    if name == "ID":
        json_type = ID_TYPE_MAPPING_TO_JSON_SCHEMA[IDTypeMapping(id_type_mapping)]
        return {
            "type": list(json_type) if isinstance(json_type, list) else json_type,
            "description": ID_DESCRIPTION,
        }

    builtin = GRAPHQL_SCALAR_TO_JSON_SCHEMA.get(name)
    if builtin is not None:
        return dict(builtin)

    return {"title": name}
