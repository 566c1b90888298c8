"""
Core schema representation for code generation.

Defines the canonical model every parser produces and every generator
consumes: ``Schema`` made of ``Field`` values, plus the tagged shape
variants generators dispatch on.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum


class FieldType(Enum):
    """Closed set of field types understood by every target."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"


PRIMITIVE_TYPES = frozenset(
    {FieldType.STRING, FieldType.NUMBER, FieldType.BOOLEAN, FieldType.DATE}
)

# Arrays are one level deep: an element may be an object but never an array.
ARRAY_ELEMENT_TYPES = PRIMITIVE_TYPES | {FieldType.OBJECT}

# Members of a nested object as accepted by the strict parser.
NESTED_OBJECT_TYPES = PRIMITIVE_TYPES


def coerce_field_type(value: Any) -> Any:
    """Return the matching FieldType, or the raw value if it names none."""
    if isinstance(value, FieldType):
        return value
    try:
        return FieldType(value)
    except (ValueError, TypeError):
        return value


@dataclass(frozen=True)
class ValidationOptions:
    """Optional constraints attached to a field."""

    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    regex: Optional[str] = None
    default: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ValidationOptions":
        """Build options from a plain mapping, ignoring unknown keys."""
        if not data:
            return cls()
        default = data.get("default")
        if default is not None and not isinstance(default, str):
            default = json.dumps(default)
        return cls(
            min=data.get("min"),
            max=data.get("max"),
            regex=data.get("regex"),
            default=default,
        )

    def is_empty(self) -> bool:
        return (
            self.min is None
            and self.max is None
            and not self.regex
            and self.default is None
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.min is not None:
            result["min"] = self.min
        if self.max is not None:
            result["max"] = self.max
        if self.regex is not None:
            result["regex"] = self.regex
        if self.default is not None:
            result["default"] = self.default
        return result


# Shape variants. A field's ``type`` tag plus its side attributes collapse
# into exactly one of these.


@dataclass(frozen=True)
class Primitive:
    kind: FieldType


@dataclass(frozen=True)
class ArrayOf:
    element: Any  # FieldType, or the raw tag when malformed


@dataclass(frozen=True)
class ObjectOf:
    fields: Tuple["Field", ...]


@dataclass(frozen=True)
class Unknown:
    raw: Any


Shape = Union[Primitive, ArrayOf, ObjectOf, Unknown]


@dataclass(frozen=True)
class Field:
    """A single named, typed slot in a schema."""

    name: str
    type: Any  # FieldType; raw value kept when it names no known type
    required: bool = False
    unique: bool = False
    validation: ValidationOptions = field(default_factory=ValidationOptions)

    # For arrays
    array_type: Any = None

    # For objects
    object_fields: Tuple["Field", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "type", coerce_field_type(self.type))
        if self.array_type is not None:
            object.__setattr__(self, "array_type", coerce_field_type(self.array_type))
        if not isinstance(self.object_fields, tuple):
            object.__setattr__(self, "object_fields", tuple(self.object_fields or ()))
        if self.validation is None:
            object.__setattr__(self, "validation", ValidationOptions())
        elif isinstance(self.validation, dict):
            object.__setattr__(
                self, "validation", ValidationOptions.from_dict(self.validation)
            )

    @property
    def shape(self) -> Shape:
        """Tagged variant describing how this field is built."""
        if isinstance(self.type, FieldType) and self.type in PRIMITIVE_TYPES:
            return Primitive(self.type)
        if self.type == FieldType.ARRAY:
            element = self.array_type if self.array_type is not None else FieldType.STRING
            return ArrayOf(element)
        if self.type == FieldType.OBJECT:
            return ObjectOf(self.object_fields)
        return Unknown(self.type)

    @property
    def type_name(self) -> str:
        if isinstance(self.type, FieldType):
            return self.type.value
        return str(self.type)

    def element_field(self) -> "Field":
        """Anonymous required field standing for one array element."""
        shape = self.shape
        element = shape.element if isinstance(shape, ArrayOf) else FieldType.STRING
        return Field(name="", type=element, required=True)

    def to_dict(self) -> Dict[str, Any]:
        """Structured document form, as read back by the JSON parser."""
        result: Dict[str, Any] = {
            "name": self.name,
            "type": self.type_name,
            "required": self.required,
            "unique": self.unique,
        }
        validation = self.validation.to_dict()
        if validation:
            result["validation"] = validation
        if self.type == FieldType.ARRAY and self.array_type is not None:
            result["arrayType"] = (
                self.array_type.value
                if isinstance(self.array_type, FieldType)
                else self.array_type
            )
        if self.type == FieldType.OBJECT and self.object_fields:
            result["objectFields"] = [f.to_dict() for f in self.object_fields]
        return result


@dataclass(frozen=True)
class Schema:
    """A named record type and its ordered fields."""

    name: str
    fields: Tuple[Field, ...] = ()

    def __post_init__(self):
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields or ()))

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_max_depth(self) -> int:
        """Object nesting depth; a schema of flat fields has depth 1."""

        def depth_of(fields: Tuple[Field, ...], current: int) -> int:
            deepest = current
            for f in fields:
                shape = f.shape
                if isinstance(shape, ObjectOf) and shape.fields:
                    deepest = max(deepest, depth_of(shape.fields, current + 1))
            return deepest

        return depth_of(self.fields, 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "fields": [f.to_dict() for f in self.fields]}

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True)
class GeneratedCode:
    """The three artifacts produced for one schema."""

    validator: str
    interface: str
    model: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "validator": self.validator,
            "interface": self.interface,
            "model": self.model,
        }
