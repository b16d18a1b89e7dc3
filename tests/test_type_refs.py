"""Tests for scalar mapping and type reference resolution."""

from typing import Any

import pytest
from hypothesis import given

from gql2jsonschema.converter.models import IDTypeMapping, IntrospectionTypeRef, Options
from gql2jsonschema.converter.scalars import BOOLEAN_DESCRIPTION, ID_DESCRIPTION, STRING_DESCRIPTION, map_scalar
from gql2jsonschema.converter.transformer import is_required, resolve_type_ref
from tests.conftest import list_of, named, non_null, scalar, type_refs


def resolve(ref: dict[str, Any], options: Options | None = None) -> dict[str, Any]:
    return resolve_type_ref(IntrospectionTypeRef.model_validate(ref), options or Options())


class TestScalarMapping:
    @pytest.mark.parametrize(
        "mapping,expected",
        [
            (IDTypeMapping.STRING, "string"),
            (IDTypeMapping.NUMBER, "number"),
            (IDTypeMapping.BOTH, ["string", "number"]),
        ],
        ids=["string", "number", "both"],
    )
    def test_id_type_mapping(self, mapping: IDTypeMapping, expected: str | list[str]) -> None:
        assert map_scalar("ID", mapping) == {"type": expected, "description": ID_DESCRIPTION}

    def test_id_defaults_to_string(self) -> None:
        assert map_scalar("ID")["type"] == "string"

    def test_builtin_scalars(self) -> None:
        assert map_scalar("String") == {"type": "string", "description": STRING_DESCRIPTION}
        assert map_scalar("Boolean") == {"type": "boolean", "description": BOOLEAN_DESCRIPTION}
        assert map_scalar("Int") == {"type": "number"}
        assert map_scalar("Float") == {"type": "number"}

    def test_custom_scalar_is_untyped(self) -> None:
        assert map_scalar("DateTime") == {"title": "DateTime"}

    def test_returns_fresh_nodes(self) -> None:
        first = map_scalar("String")
        first["description"] = "changed"
        assert map_scalar("String")["description"] == STRING_DESCRIPTION

        both = map_scalar("ID", IDTypeMapping.BOTH)
        both["type"].append("null")
        assert map_scalar("ID", IDTypeMapping.BOTH)["type"] == ["string", "number"]


class TestTypeRefResolution:
    def test_scalar(self) -> None:
        assert resolve(scalar("Boolean")) == {"type": "boolean", "description": BOOLEAN_DESCRIPTION}

    def test_id_scalar_uses_options(self) -> None:
        result = resolve(scalar("ID"), Options(idTypeMapping="both"))
        assert result["type"] == ["string", "number"]

    @pytest.mark.parametrize("kind", ["OBJECT", "INTERFACE", "INPUT_OBJECT", "ENUM", "UNION"])
    def test_named_types_are_references(self, kind: str) -> None:
        assert resolve(named(kind, "Vehicle")) == {"$ref": "#/definitions/Vehicle"}

    def test_non_null_is_transparent(self) -> None:
        assert resolve(non_null(scalar("String"))) == resolve(scalar("String"))

    def test_list(self) -> None:
        assert resolve(list_of(scalar("Int"))) == {"type": "array", "items": {"type": "number"}}

    def test_nested_lists(self) -> None:
        result = resolve(list_of(non_null(list_of(named("OBJECT", "Cell")))))
        assert result == {
            "type": "array",
            "items": {"type": "array", "items": {"$ref": "#/definitions/Cell"}},
        }

    def test_nullable_array_items(self) -> None:
        options = Options(nullableArrayItems=True)
        result = resolve(list_of(scalar("Int")), options)
        assert result == {"type": "array", "items": {"anyOf": [{"type": "number"}, {"type": "null"}]}}

    def test_nullable_array_items_keeps_non_null_items(self) -> None:
        options = Options(nullableArrayItems=True)
        result = resolve(list_of(non_null(scalar("Int"))), options)
        assert result == {"type": "array", "items": {"type": "number"}}

    @pytest.mark.parametrize(
        "ref,expected",
        [
            ({"kind": "NON_NULL", "name": None, "ofType": None}, {}),
            ({"kind": "LIST", "name": None, "ofType": None}, {"type": "array"}),
            ({"kind": "SCALAR", "name": None, "ofType": None}, {}),
            ({"kind": "OBJECT", "name": None, "ofType": None}, {}),
            ({}, {}),
        ],
        ids=["non_null_without_of_type", "list_without_of_type", "unnamed_scalar", "unnamed_object", "empty"],
    )
    def test_malformed_references_degrade(self, ref: dict[str, Any], expected: dict[str, Any]) -> None:
        assert resolve(ref) == expected

    def test_is_required(self) -> None:
        assert is_required(IntrospectionTypeRef.model_validate(non_null(scalar("String"))))
        assert not is_required(IntrospectionTypeRef.model_validate(scalar("String")))
        assert not is_required(IntrospectionTypeRef.model_validate(list_of(non_null(scalar("String")))))
        assert is_required(IntrospectionTypeRef.model_validate(non_null(list_of(non_null(scalar("String"))))))


@given(type_refs())
def test_non_null_wrapper_is_ignored(ref: dict[str, Any]) -> None:
    """Resolving NON_NULL(x) gives the same node as resolving x."""
    inner = ref["ofType"] if ref["kind"] == "NON_NULL" else ref
    assert resolve(non_null(inner)) == resolve(inner)


@given(type_refs())
def test_is_required_only_checks_outer_kind(ref: dict[str, Any]) -> None:
    assert is_required(IntrospectionTypeRef.model_validate(ref)) == (ref["kind"] == "NON_NULL")


@given(type_refs())
def test_resolution_is_deterministic(ref: dict[str, Any]) -> None:
    options = Options(nullableArrayItems=True, idTypeMapping="both")
    assert resolve(ref, options) == resolve(ref, options)
