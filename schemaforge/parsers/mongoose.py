"""
Best-effort parser for Mongoose schema definitions.

Reads ``<Name>Schema = new Schema({...})`` and turns each top-level
``name: clause`` pair into a field. Nested object clauses are recovered
one level deep.
"""

import re
from typing import Dict, List, Optional, Tuple

from ..codegen.core.schema import Field, FieldType, Schema, ValidationOptions
from ..logging_config import get_logger
from .base import (
    SYNTAX,
    ParseError,
    SchemaParser,
    check_unique_names,
    extract_braced,
    strip_quotes,
    to_number,
)

logger = get_logger(__name__)

SCHEMA_NAME_PATTERN = re.compile(r"(\w+)Schema\s*=\s*new\s+(?:mongoose\.)?Schema\b")
SCHEMA_BODY_PATTERN = re.compile(
    r"new\s+(?:mongoose\.)?Schema\s*(?:<[^>]*>)?\s*\(\s*\{"
)
PAIR_PATTERN = re.compile(r"^['\"]?(\w+)['\"]?\s*:\s*(.*)$", re.DOTALL)
LINE_COMMENT_PATTERN = re.compile(r"^\s*//.*$", re.MULTILINE)

KEYWORD_TYPES = {
    "string": FieldType.STRING,
    "number": FieldType.NUMBER,
    "boolean": FieldType.BOOLEAN,
    "date": FieldType.DATE,
    "mixed": FieldType.OBJECT,
    "object": FieldType.OBJECT,
    "map": FieldType.OBJECT,
}

OPENERS = "{[("
CLOSERS = "}])"


def keyword_type(keyword: str) -> Optional[FieldType]:
    """Map ``String``, ``Schema.Types.Mixed`` and friends to a field type."""
    token = keyword.strip().split(".")[-1].lower()
    return KEYWORD_TYPES.get(token)


def split_top_level(body: str) -> List[str]:
    """Split on commas that sit outside brackets and string literals."""
    parts = []
    depth = 0
    quote = None
    start = 0
    index = 0
    while index < len(body):
        char = body[index]
        if quote:
            if char == "\\":
                index += 1
            elif char == quote:
                quote = None
        elif char in "'\"`":
            quote = char
        elif char in OPENERS:
            depth += 1
        elif char in CLOSERS:
            depth -= 1
        elif char == "," and depth == 0:
            parts.append(body[start:index])
            start = index + 1
        index += 1
    parts.append(body[start:])
    return [part.strip() for part in parts if part.strip()]


def read_pairs(body: str) -> List[Tuple[str, str]]:
    """Top-level ``key: value`` pairs of an object literal body."""
    pairs = []
    for entry in split_top_level(LINE_COMMENT_PATTERN.sub("", body)):
        match = PAIR_PATTERN.match(entry)
        if not match:
            logger.warning("Skipping unreadable schema entry: %s", entry[:40])
            continue
        pairs.append((match.group(1), match.group(2).strip()))
    return pairs


def _is_true(value: Optional[str]) -> bool:
    # Also accepts the [true, 'message'] form
    return bool(value) and value.lstrip("[ ").startswith("true")


class DocumentModelParser(SchemaParser):
    """Recover a schema from a Mongoose model definition."""

    @property
    def format_name(self) -> str:
        return "mongoose"

    def parse(self, text: str) -> Schema:
        source = text or ""

        name_match = SCHEMA_NAME_PATTERN.search(source)
        if not name_match:
            raise ParseError("No Mongoose schema found", SYNTAX)
        name = name_match.group(1)

        body_match = SCHEMA_BODY_PATTERN.search(source, name_match.start())
        body = extract_braced(source, body_match.end() - 1) if body_match else None
        if body is None:
            raise ParseError("Invalid schema format", SYNTAX)

        fields = self._parse_fields(body, nested=False)
        check_unique_names(fields, name)

        logger.debug("Parsed Mongoose schema %s with %d fields", name, len(fields))
        return Schema(name=name, fields=tuple(fields))

    def _parse_fields(self, body: str, nested: bool) -> List[Field]:
        return [
            self._build_field(name, clause, nested) for name, clause in read_pairs(body)
        ]

    def _build_field(self, name: str, clause: str, nested: bool) -> Field:
        options = self._clause_options(clause)

        typed = "type" in options and not options["type"].startswith("{")
        if clause.startswith("{") and not typed:
            # Plain object literal: its keys are members, not options.
            # A member named `type` holding a clause keeps it a plain object.
            object_fields: List[Field] = []
            if nested:
                logger.warning("Members of nested object '%s' are not recovered", name)
            else:
                object_fields = self._parse_fields(extract_braced(clause, 0) or "", True)
                check_unique_names(object_fields, name)
            return Field(name=name, type=FieldType.OBJECT, object_fields=tuple(object_fields))

        field_type, array_type = self._resolve_type(options.get("type", clause))
        return Field(
            name=name,
            type=field_type,
            required=_is_true(options.get("required")),
            unique=_is_true(options.get("unique")),
            validation=self._validation(options),
            array_type=array_type,
        )

    @staticmethod
    def _clause_options(clause: str) -> Dict[str, str]:
        if not clause.startswith("{"):
            return {}
        return dict(read_pairs(extract_braced(clause, 0) or ""))

    def _resolve_type(self, token: str) -> Tuple[FieldType, Optional[FieldType]]:
        if token.startswith("["):
            return FieldType.ARRAY, self._element_type(token)
        return keyword_type(token) or FieldType.STRING, None

    def _element_type(self, token: str) -> FieldType:
        inner = token.strip()[1:]
        if inner.endswith("]"):
            inner = inner[:-1]
        inner = inner.strip()
        if not inner:
            return FieldType.STRING

        if inner.startswith("{"):
            element = self._clause_options(inner).get("type")
            if element is None:
                return FieldType.OBJECT
            return keyword_type(element) or FieldType.STRING
        return keyword_type(inner) or FieldType.STRING

    @staticmethod
    def _validation(options: Dict[str, str]) -> ValidationOptions:
        minimum = options.get("minlength", options.get("min"))
        maximum = options.get("maxlength", options.get("max"))

        default = options.get("default")
        if default is not None:
            raw = default
            default = strip_quotes(raw)
            if default != raw:
                default = default.replace("\\'", "'").replace('\\"', '"')

        return ValidationOptions(
            min=to_number(minimum) if minimum is not None else None,
            max=to_number(maximum) if maximum is not None else None,
            default=default,
        )
