"""Schema data model for function-calling and structured-output requests.

A `Schema` describes the shape of one value: a primitive, an array or an
object. It covers a select subset of the OpenAPI 3.0 schema object and is
serialized into the wire form expected by the remote service.

The model is a passive declarative container. Cross-field consistency (e.g.
`items` only on arrays, `required` keys present in `properties`) is left to
the caller and, ultimately, to the remote service.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    NonNegativeInt,
    field_serializer,
    field_validator,
)


class DataType(str, Enum):
    """OpenAPI data type of a schema node."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def wire_name(self) -> str:
        """Name of the type as sent to the remote service."""

        return _WIRE_NAMES[self]

    @property
    def is_leaf(self) -> bool:
        """True for non-composite types."""

        return self not in (DataType.ARRAY, DataType.OBJECT)


_WIRE_NAMES: dict[DataType, str] = {
    DataType.STRING: "STRING",
    DataType.NUMBER: "NUMBER",
    DataType.INTEGER: "INTEGER",
    DataType.BOOLEAN: "BOOLEAN",
    DataType.ARRAY: "ARRAY",
    DataType.OBJECT: "OBJECT",
}

_MAX_EXACT_INT = 2**53


class Schema(BaseModel):
    """Shape of a single value, possibly composed of nested schemas.

    Every attribute except `type` is optional; `None` means absent and absent
    attributes are omitted from the serialized form. Supported formats are
    int32/int64 for integers, float/double for numbers and enum for strings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type: DataType
    format: str | None = None
    description: str | None = None
    nullable: bool | None = None
    enum_values: tuple[str, ...] | None = Field(default=None, alias="enum")
    items: Schema | None = None
    properties: Mapping[str, Schema] | None = None
    required_properties: tuple[str, ...] | None = Field(default=None, alias="required")
    minimum: FiniteFloat | None = None
    maximum: FiniteFloat | None = None
    min_length: NonNegativeInt | None = Field(default=None, alias="minLength")
    max_length: NonNegativeInt | None = Field(default=None, alias="maxLength")
    pattern: str | None = None
    min_items: NonNegativeInt | None = Field(default=None, alias="minItems")
    max_items: NonNegativeInt | None = Field(default=None, alias="maxItems")

    @field_validator("properties")
    @classmethod
    def _freeze_properties(
        cls, value: Mapping[str, Schema] | None
    ) -> Mapping[str, Schema] | None:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    @field_serializer("type")
    def _serialize_type(self, value: DataType) -> str:
        return value.wire_name

    @field_serializer("properties", mode="wrap")
    def _serialize_properties(self, value, handler):
        if value is None:
            return None
        return handler(dict(value))

    @field_serializer("minimum", "maximum")
    def _serialize_bound(self, value: float | None) -> float | int | None:
        # whole bounds are written as integer literals: 0, not 0.0
        if value is not None and value.is_integer() and abs(value) <= _MAX_EXACT_INT:
            return int(value)
        return value

    def __hash__(self) -> int:
        values = []
        for value in self.__dict__.values():
            if isinstance(value, Mapping):
                value = frozenset(value.items())
            values.append(value)
        return hash((self.__class__, tuple(values)))

    def to_dict(self) -> dict:
        """Return the wire representation of this schema."""

        return schema_to_dict(self)


def schema_to_dict(schema: Schema) -> dict:
    """Serialize a schema tree into its nested wire mapping.

    Keys use the wire aliases (`enum`, `required`, `minLength`, ...), absent
    attributes are dropped and `properties` keeps insertion order.
    """

    return schema.model_dump(mode="json", by_alias=True, exclude_none=True)
