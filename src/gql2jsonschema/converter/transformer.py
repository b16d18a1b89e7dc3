import json
from collections.abc import Callable
from typing import Any

from graphql import TypeKind

from gql2jsonschema import log
from gql2jsonschema.converter.models import (
    IntrospectionField,
    IntrospectionInputValue,
    IntrospectionQuery,
    IntrospectionType,
    IntrospectionTypeRef,
    Options,
)
from gql2jsonschema.converter.scalars import map_scalar

JSON_SCHEMA_DRAFT_06 = "http://json-schema.org/draft-06/schema#"
DEFINITIONS_PREFIX = "#/definitions/"
ROOT_TYPE_NAMES = ("Query", "Mutation")
INTERNAL_TYPE_PREFIX = "__"


def definition_ref(type_name: str) -> dict[str, Any]:
    return {"$ref": f"{DEFINITIONS_PREFIX}{type_name}"}


def is_required(type_ref: IntrospectionTypeRef) -> bool:
    """Only the outermost NON_NULL wrapper makes a field or argument required."""
    return type_ref.kind == TypeKind.NON_NULL.name


def is_internal_type(type_name: str) -> bool:
    return type_name.startswith(INTERNAL_TYPE_PREFIX)


def resolve_type_ref(type_ref: IntrospectionTypeRef, options: Options) -> dict[str, Any]:
    """
    Unwrap a GraphQL type reference chain into a JSON Schema node.

    NON_NULL is transparent here; callers decide requiredness with `is_required`.
    Named types other than scalars become `$ref`s into `definitions`. Anything
    that cannot be resolved yields an empty node.

    Args:
        type_ref: The type reference (possibly wrapped in NON_NULL/LIST)
        options: Conversion options

    Returns:
        dict[str, Any]: A new JSON Schema node
    """
    if type_ref.kind == TypeKind.NON_NULL.name:
        if type_ref.of_type is None:
            log.debug("NON_NULL type reference without ofType")
            return {}
        return resolve_type_ref(type_ref.of_type, options)

    if type_ref.kind == TypeKind.LIST.name:
        if type_ref.of_type is None:
            log.debug("LIST type reference without ofType")
            return {"type": "array"}

        items = resolve_type_ref(type_ref.of_type, options)
        if options.nullable_array_items and not is_required(type_ref.of_type):
            # List elements are nullable unless wrapped in NON_NULL
            items = {"anyOf": [items, {"type": "null"}]}
        return {"type": "array", "items": items}

    if type_ref.name is None:
        log.debug(f"Unresolvable type reference of kind {type_ref.kind!r}")
        return {}

    if type_ref.kind == TypeKind.SCALAR.name:
        return map_scalar(type_ref.name, options.id_type_mapping)

    return definition_ref(type_ref.name)


def reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON literal")


def parse_default_value(default_value: str) -> tuple[bool, Any]:
    """Parse a serialized default value, returning (parsed, value)."""
    try:
        return True, json.loads(default_value, parse_constant=reject_constant)
    except ValueError:
        # GraphQL literals such as enum values are not valid JSON
        log.debug(f"Ignoring default value that is not a JSON literal: {default_value}")
        return False, None


class IntrospectionTransformer:
    """
    Transformer class to convert a GraphQL introspection result to JSON Schema.

    Query and Mutation root types become properties of the root node; every
    other named type is built once under `definitions` and referenced with `$ref`.
    """

    def __init__(self, introspection: IntrospectionQuery, options: Options | None = None):
        self.introspection = introspection
        self.options = options if options is not None else Options()

    @property
    def types(self) -> list[IntrospectionType]:
        return self.introspection.schema_.types or []

    def transform(self) -> dict[str, Any]:
        """
        Transform the introspection result to a JSON Schema document.

        Returns:
            dict[str, Any]: JSON Schema representation
        """
        schema = self.introspection.schema_
        json_schema: dict[str, Any] = {
            "$schema": JSON_SCHEMA_DRAFT_06,
            "properties": {},
            "definitions": {},
        }

        for property_name, root_ref in (("Query", schema.query_type), ("Mutation", schema.mutation_type)):
            if root_ref is None or root_ref.name is None:
                continue
            root_type = self.find_type(root_ref.name)
            if root_type is None:
                log.debug(f"{property_name} root type '{root_ref.name}' not found in introspection types")
                continue
            json_schema["properties"][property_name] = self.build_type(root_type)

        for named_type in self.filter_types():
            if named_type.name in ROOT_TYPE_NAMES:
                continue
            if named_type.name in json_schema["definitions"]:
                log.debug(f"Skipping duplicate definition of type: {named_type.name}")
                continue
            json_schema["definitions"][named_type.name] = self.build_type(named_type)
            log.debug(f"Transformed type: {named_type.name}")

        log.info(f"Successfully transformed {len(json_schema['definitions'])} types")
        return json_schema

    def find_type(self, name: str) -> IntrospectionType | None:
        """Return the first type with the given name, searching internal types too."""
        return next((named_type for named_type in self.types if named_type.name == name), None)

    def filter_types(self) -> list[IntrospectionType]:
        if not self.options.ignore_internals:
            return list(self.types)
        return [named_type for named_type in self.types if not is_internal_type(named_type.name)]

    def build_type(self, named_type: IntrospectionType) -> dict[str, Any]:
        """
        Build the JSON Schema node for a named GraphQL type.

        Args:
            named_type: The introspected type

        Returns:
            dict[str, Any]: JSON Schema definition
        """
        definition: dict[str, Any] = {"type": "object"}

        if named_type.kind in (TypeKind.OBJECT.name, TypeKind.INTERFACE.name):
            self.add_properties(definition, named_type.fields or [], self.build_field)
        elif named_type.kind == TypeKind.INPUT_OBJECT.name:
            self.add_properties(definition, named_type.input_fields or [], self.build_input_value)
        elif named_type.kind == TypeKind.ENUM.name:
            definition["type"] = "string"
            any_of = [self.build_enum_value(value.name, value.description) for value in named_type.enum_values or []]
            if any_of:
                definition["anyOf"] = any_of
        elif named_type.kind == TypeKind.UNION.name:
            del definition["type"]
            one_of = [
                definition_ref(possible_type.name)
                for possible_type in named_type.possible_types or []
                if possible_type.name is not None
            ]
            if one_of:
                definition["oneOf"] = one_of
        else:
            log.debug(f"Type {named_type.name} of kind {named_type.kind} has no JSON Schema body")

        if named_type.description:
            definition["description"] = named_type.description

        return definition

    def add_properties(
        self, definition: dict[str, Any], members: list[Any], build_member: Callable[[Any], dict[str, Any]]
    ) -> None:
        """Add one property per member and collect the required ones."""
        properties: dict[str, Any] = {}
        required: list[str] = []
        for member in members:
            properties[member.name] = build_member(member)
            if is_required(member.type):
                required.append(member.name)

        if properties:
            definition["properties"] = properties
        if required:
            definition["required"] = required

    @staticmethod
    def build_enum_value(name: str, description: str | None) -> dict[str, Any]:
        value: dict[str, Any] = {"enum": [name]}
        if description:
            value["title"] = description
            value["description"] = description
        return value

    def build_field(self, field: IntrospectionField) -> dict[str, Any]:
        """
        Build a field as an object with its `return` type and its `arguments`.

        Args:
            field: The introspected field

        Returns:
            dict[str, Any]: JSON Schema property definition
        """
        arguments: dict[str, Any] = {"type": "object"}
        self.add_properties(arguments, field.args or [], self.build_input_value)

        definition: dict[str, Any] = {
            "type": "object",
            "properties": {
                "return": resolve_type_ref(field.type, self.options),
                "arguments": arguments,
            },
        }
        if field.description:
            definition["description"] = field.description

        return definition

    def build_input_value(self, input_value: IntrospectionInputValue) -> dict[str, Any]:
        """
        Build an argument or input field.

        The default value is attached only when it parses as a non-null JSON literal.

        Args:
            input_value: The introspected argument or input field

        Returns:
            dict[str, Any]: JSON Schema property definition
        """
        definition = resolve_type_ref(input_value.type, self.options)
        definition.pop("description", None)
        if input_value.description:
            definition["description"] = input_value.description

        if input_value.default_value is not None:
            parsed, default = parse_default_value(input_value.default_value)
            if parsed and default is not None:
                definition["default"] = default

        return definition
