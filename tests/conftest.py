import json
from pathlib import Path
from typing import Any

import pytest
from hypothesis import strategies as st
from hypothesis.strategies import composite

SCALAR_TYPES = ["ID", "String", "Int", "Float", "Boolean"]
NAMED_KINDS = ["OBJECT", "INTERFACE", "INPUT_OBJECT", "ENUM", "UNION"]


class SampleData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    INTROSPECTION: Path = TESTS_DATA_DIR / "introspection.json"


def named(kind: str, name: str | None) -> dict[str, Any]:
    return {"kind": kind, "name": name, "ofType": None}


def scalar(name: str) -> dict[str, Any]:
    return named("SCALAR", name)


def non_null(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "LIST", "name": None, "ofType": of_type}


def field(
    name: str, type_ref: dict[str, Any], args: list[dict[str, Any]] | None = None, **extra: Any
) -> dict[str, Any]:
    return {"name": name, "args": args or [], "type": type_ref, **extra}


def input_value(name: str, type_ref: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {"name": name, "type": type_ref, **extra}


def document(
    types: list[dict[str, Any]],
    query: str | None = "Query",
    mutation: str | None = None,
) -> dict[str, Any]:
    return {
        "__schema": {
            "queryType": {"name": query} if query else None,
            "mutationType": {"name": mutation} if mutation else None,
            "types": types,
        }
    }


@pytest.fixture(scope="module")
def sample_response() -> dict[str, Any]:
    assert SampleData.INTROSPECTION.exists(), f"Missing test file: {SampleData.INTROSPECTION}"
    return json.loads(SampleData.INTROSPECTION.read_text())  # type: ignore[no-any-return]


@pytest.fixture(scope="module")
def sample_introspection(sample_response: dict[str, Any]) -> dict[str, Any]:
    return sample_response["data"]  # type: ignore[no-any-return]


type_names = st.from_regex(r"\A[A-Z][A-Za-z0-9]{0,15}\Z")


@composite
def leaf_refs(draw: st.DrawFn) -> dict[str, Any]:
    """A named (non-wrapper) type reference."""
    if draw(st.booleans()):
        return scalar(draw(st.sampled_from(SCALAR_TYPES) | type_names))
    return named(draw(st.sampled_from(NAMED_KINDS)), draw(type_names))


@composite
def type_refs(draw: st.DrawFn, max_depth: int = 4) -> dict[str, Any]:
    """A well-formed reference chain, never with NON_NULL directly inside NON_NULL."""
    ref = draw(leaf_refs())
    if draw(st.booleans()):
        ref = non_null(ref)
    for _ in range(draw(st.integers(min_value=0, max_value=max_depth))):
        ref = list_of(ref)
        if draw(st.booleans()):
            ref = non_null(ref)
    return ref
