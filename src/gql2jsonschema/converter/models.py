from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IDTypeMapping(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOTH = "both"


DEFAULT_ID_TYPE_MAPPING = IDTypeMapping.STRING


def is_valid_id_type_mapping(value: str) -> bool:
    return value in {mapping.value for mapping in IDTypeMapping}


class Options(BaseModel):
    """Conversion options shared by every stage of the translation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    ignore_internals: bool = Field(True, alias="ignoreInternals")
    nullable_array_items: bool = Field(False, alias="nullableArrayItems")
    id_type_mapping: IDTypeMapping = Field(DEFAULT_ID_TYPE_MAPPING, alias="idTypeMapping")


class IntrospectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class IntrospectionTypeRef(IntrospectionModel):
    kind: str | None = None
    name: str | None = None
    of_type: "IntrospectionTypeRef | None" = Field(None, alias="ofType")


class IntrospectionInputValue(IntrospectionModel):
    """An argument of a field or a field of an input object."""

    name: str
    description: str | None = None
    type: IntrospectionTypeRef = Field(default_factory=IntrospectionTypeRef)
    default_value: str | None = Field(None, alias="defaultValue")


class IntrospectionField(IntrospectionModel):
    name: str
    description: str | None = None
    args: list[IntrospectionInputValue] | None = None
    type: IntrospectionTypeRef = Field(default_factory=IntrospectionTypeRef)


class IntrospectionEnumValue(IntrospectionModel):
    name: str
    description: str | None = None


class IntrospectionType(IntrospectionModel):
    kind: str | None = None
    name: str = ""
    description: str | None = None
    fields: list[IntrospectionField] | None = None
    input_fields: list[IntrospectionInputValue] | None = Field(None, alias="inputFields")
    interfaces: list[IntrospectionTypeRef] | None = None
    enum_values: list[IntrospectionEnumValue] | None = Field(None, alias="enumValues")
    possible_types: list[IntrospectionTypeRef] | None = Field(None, alias="possibleTypes")


class IntrospectionRootRef(IntrospectionModel):
    name: str | None = None


class IntrospectionSchema(IntrospectionModel):
    query_type: IntrospectionRootRef | None = Field(None, alias="queryType")
    mutation_type: IntrospectionRootRef | None = Field(None, alias="mutationType")
    types: list[IntrospectionType] | None = None


class IntrospectionQuery(IntrospectionModel):
    """Root of an introspection query result, i.e. the `data` payload."""

    schema_: IntrospectionSchema = Field(default_factory=IntrospectionSchema, alias="__schema")
