"""
Best-effort parser for TypeScript interface and object type declarations.

Recognizes ``name[?]: type`` member lines inside the first declared
interface (or ``type X = {`` alias). Nested inline object members are
not lifted: such fields come back as objects with no members.
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

DECLARATION_PATTERN = re.compile(r"\b(?:interface\s+(\w+)|type\s+(\w+)\s*=)")
ANNOTATION_PATTERN = re.compile(r"@(\w+)((?:(?!\s@\w).)*)")
TRAILING_COMMENT_PATTERN = re.compile(r"\s//.*$")
COMMENT_DELIMITER_PATTERN = re.compile(r"^\s*/?\*+/?|\*+/\s*$")

PRIMITIVE_TOKENS = {
    "string": FieldType.STRING,
    "number": FieldType.NUMBER,
    "boolean": FieldType.BOOLEAN,
    "date": FieldType.DATE,
}


def map_type_token(token: str) -> FieldType:
    """Map a TypeScript type token to a field type, defaulting to string."""
    clean = token.strip().lower()
    if clean in PRIMITIVE_TOKENS:
        return PRIMITIVE_TOKENS[clean]
    if clean.startswith("{") or clean.startswith("record") or clean == "object":
        return FieldType.OBJECT
    return FieldType.STRING


def split_members(line: str) -> List[str]:
    """Split a line on semicolons that sit outside braces."""
    parts = []
    depth = 0
    start = 0
    for index, char in enumerate(line):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == ";" and depth == 0:
            parts.append(line[start:index])
            start = index + 1
    parts.append(line[start:])
    return [part.strip() for part in parts if part.strip()]


class TypeDeclarationParser(SchemaParser):
    """Recover a schema from a TypeScript interface declaration."""

    @property
    def format_name(self) -> str:
        return "typescript"

    def parse(self, text: str) -> Schema:
        source = (text or "").strip()
        if not source:
            raise ParseError("Empty input", SYNTAX)

        match = DECLARATION_PATTERN.search(source)
        if not match:
            raise ParseError("No interface found in TypeScript code", SYNTAX)
        name = match.group(1) or match.group(2)

        open_index = source.find("{", match.end())
        body = extract_braced(source, open_index) if open_index != -1 else None
        if body is None:
            raise ParseError("Invalid interface format", SYNTAX)

        fields = self._parse_body(body)
        check_unique_names(fields, name)

        logger.debug("Parsed TypeScript interface %s with %d fields", name, len(fields))
        return Schema(name=name, fields=tuple(fields))

    def _parse_body(self, body: str) -> List[Field]:
        fields: List[Field] = []
        annotations: Dict[str, str] = {}
        comment_lines: List[str] = []
        in_comment = False
        skip_depth = 0

        for raw_line in body.splitlines():
            line = raw_line.strip()
            if not line:
                continue

            # Members of a multi-line inline object
            if skip_depth:
                skip_depth += line.count("{") - line.count("}")
                continue

            if in_comment or line.startswith("/*"):
                end = line.find("*/")
                in_comment = end == -1
                if in_comment:
                    comment_lines.append(line)
                    continue
                # Text after the closing delimiter is still member text
                comment_lines.append(line[: end + 2])
                annotations = self._read_annotations(comment_lines)
                comment_lines = []
                line = line[end + 2:].strip()
                if not line:
                    continue

            if line.startswith("//") or line.startswith("*") or ":" not in line:
                continue

            for segment in split_members(TRAILING_COMMENT_PATTERN.sub("", line)):
                member = self._parse_member(segment)
                if member is None:
                    continue

                field_name, optional, type_text = member
                fields.append(
                    self._build_field(field_name, optional, type_text, annotations)
                )
                annotations = {}

                depth = type_text.count("{") - type_text.count("}")
                if depth > 0:
                    logger.warning("Nested members of '%s' are not recovered", field_name)
                    skip_depth = depth

        return fields

    def _parse_member(self, line: str) -> Optional[Tuple[str, bool, str]]:
        line = line.rstrip(";,").strip()
        name_part, _, type_part = line.partition(":")
        name_part = name_part.strip()
        type_part = type_part.strip()
        if not name_part or not type_part:
            return None

        optional = name_part.endswith("?")
        name_part = name_part.rstrip("?").strip()
        if name_part.startswith("readonly "):
            name_part = name_part[len("readonly "):].strip()
        name_part = strip_quotes(name_part)
        if not name_part:
            return None
        return name_part, optional, type_part

    def _build_field(
        self, name: str, optional: bool, type_text: str, annotations: Dict[str, str]
    ) -> Field:
        array_type = None
        if type_text.endswith("[]"):
            field_type = FieldType.ARRAY
            array_type = map_type_token(type_text[:-2])
        else:
            field_type = map_type_token(type_text)

        validation = ValidationOptions(
            min=to_number(annotations.get("min", "")),
            max=to_number(annotations.get("max", "")),
            regex=self._pattern(annotations.get("pattern")),
            default=annotations.get("default") or None,
        )

        return Field(
            name=name,
            type=field_type,
            required=not optional,
            unique="unique" in annotations,
            validation=validation,
            array_type=array_type,
        )

    @staticmethod
    def _read_annotations(lines: List[str]) -> Dict[str, str]:
        text = " ".join(COMMENT_DELIMITER_PATTERN.sub("", line) for line in lines)
        return {
            key: value.strip().replace("*\\/", "*/")
            for key, value in ANNOTATION_PATTERN.findall(text)
        }

    @staticmethod
    def _pattern(value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if len(value) >= 2 and value.startswith("/") and value.endswith("/"):
            value = value[1:-1]
        return value
