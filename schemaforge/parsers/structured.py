"""Strict parser for the structured (JSON) schema description.

The document mirrors ``Schema.to_dict()``::

    {"name": "User", "fields": [{"name": "email", "type": "string",
                                 "required": true, "unique": true}]}
"""

import json
from typing import Any, Dict, List, Optional

from ..codegen.core.schema import (
    ARRAY_ELEMENT_TYPES,
    NESTED_OBJECT_TYPES,
    Field,
    FieldType,
    Schema,
    ValidationOptions,
)
from ..logging_config import get_logger
from .base import SYNTAX, ParseError, SchemaParser, check_unique_names, type_listing

logger = get_logger(__name__)

ALL_TYPES = frozenset(FieldType)


def _lookup_type(value: Any, allowed) -> Optional[FieldType]:
    if not isinstance(value, str):
        return None
    try:
        field_type = FieldType(value)
    except ValueError:
        return None
    return field_type if field_type in allowed else None


def _valid_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class StructuredTextParser(SchemaParser):
    """Parse a JSON schema description, rejecting anything malformed."""

    @property
    def format_name(self) -> str:
        return "json"

    def parse(self, text: str) -> Schema:
        """Parse JSON text into a Schema.

        Args:
            text: JSON document with ``name`` and ``fields``.

        Returns:
            The validated Schema.

        Raises:
            ParseError: If the JSON is malformed or breaks a schema rule.
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug("JSON decoding failed: %s", e)
            raise ParseError("Invalid JSON format", SYNTAX) from e

        if not isinstance(data, dict):
            raise ParseError("Schema must be a JSON object", SYNTAX)

        return self.parse_document(data)

    def parse_document(self, data: Dict[str, Any]) -> Schema:
        """Validate an already-decoded document."""
        name = data.get("name")
        if not _valid_name(name):
            raise ParseError("Schema must have a valid name")

        raw_fields = data.get("fields")
        if not isinstance(raw_fields, list):
            raise ParseError("Schema must have a fields array")

        fields = [self._parse_field(raw, index) for index, raw in enumerate(raw_fields)]
        check_unique_names(fields, name)

        logger.debug("Parsed JSON schema %s with %d fields", name, len(fields))
        return Schema(name=name, fields=tuple(fields))

    def _parse_field(self, raw: Any, index: int) -> Field:
        if not isinstance(raw, dict):
            raise ParseError(f"Field at index {index} must be an object")

        name = raw.get("name")
        if not _valid_name(name):
            raise ParseError(f"Field at index {index} must have a valid name")

        field_type = _lookup_type(raw.get("type"), ALL_TYPES)
        if field_type is None:
            raise ParseError(
                f"Field '{name}' has invalid type. "
                f"Must be one of: {type_listing(ALL_TYPES)}"
            )

        array_type = None
        if field_type == FieldType.ARRAY:
            array_type = _lookup_type(raw.get("arrayType"), ARRAY_ELEMENT_TYPES)
            if array_type is None:
                raise ParseError(f"Array field '{name}' must have a valid arrayType")

        object_fields: List[Field] = []
        if field_type == FieldType.OBJECT:
            object_fields = self._parse_object_fields(raw.get("objectFields"), name)

        return Field(
            name=name,
            type=field_type,
            required=raw.get("required") is True,
            unique=raw.get("unique") is True,
            validation=self._parse_validation(raw.get("validation"), name),
            array_type=array_type,
            object_fields=tuple(object_fields),
        )

    def _parse_object_fields(self, raw_fields: Any, parent: str) -> List[Field]:
        if raw_fields is None:
            return []
        if not isinstance(raw_fields, list):
            raise ParseError(f"Object field '{parent}' must have an objectFields array")

        members = []
        for index, raw in enumerate(raw_fields):
            if not isinstance(raw, dict) or not _valid_name(raw.get("name")):
                raise ParseError(
                    f"Object field at index {index} in '{parent}' must have a valid name"
                )
            name = raw["name"]

            # One level only: members are primitives
            field_type = _lookup_type(raw.get("type"), NESTED_OBJECT_TYPES)
            if field_type is None:
                raise ParseError(
                    f"Object field '{name}' has invalid type. "
                    f"Must be one of: {type_listing(NESTED_OBJECT_TYPES)}"
                )

            members.append(
                Field(
                    name=name,
                    type=field_type,
                    required=raw.get("required") is True,
                    unique=raw.get("unique") is True,
                    validation=self._parse_validation(raw.get("validation"), name),
                )
            )

        check_unique_names(members, parent)
        return members

    def _parse_validation(self, raw: Any, name: str) -> ValidationOptions:
        if raw is None:
            return ValidationOptions()
        if not isinstance(raw, dict):
            raise ParseError(f"Field '{name}' has invalid validation: must be an object")

        for key in ("min", "max"):
            value = raw.get(key)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, (int, float))
            ):
                raise ParseError(
                    f"Field '{name}' has invalid validation.{key}: must be a number"
                )

        regex = raw.get("regex")
        if regex is not None and not isinstance(regex, str):
            raise ParseError(
                f"Field '{name}' has invalid validation.regex: must be a string"
            )

        return ValidationOptions.from_dict(raw)
