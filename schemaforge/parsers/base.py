"""
Base parser interface for reading schemas back from source text.

Defines the contract every reverse parser implements and the helpers
they share for brace matching and name checks.
"""

import re
from abc import ABC, abstractmethod
from collections import Counter
from typing import Iterable, Optional, Union

from ..codegen.core.schema import Field, FieldType, Schema

SYNTAX = "syntax"
SEMANTIC = "semantic"

_NUMBER_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")


class ParseError(Exception):
    """Raised when source text cannot be turned into a schema.

    Attributes:
        message: Human-readable description of the violated expectation.
        kind: ``"syntax"`` for unreadable input, ``"semantic"`` for input that
            reads fine but breaks a schema rule.
    """

    def __init__(self, message: str, kind: str = SEMANTIC):
        super().__init__(message)
        self.message = message
        self.kind = kind


class SchemaParser(ABC):
    """Abstract base class for all schema parsers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the name of the source format (e.g., 'json')."""
        pass

    @abstractmethod
    def parse(self, text: str) -> Schema:
        """
        Parse source text into a schema.

        Raises:
            ParseError: On the first violation found; no partial schema is
                ever returned.
        """
        pass


def check_unique_names(fields: Iterable[Field], owner: str) -> None:
    """Reject duplicate field names within one field list."""
    counts = Counter(f.name for f in fields)
    duplicates = [name for name, count in counts.items() if count > 1]
    if duplicates:
        raise ParseError(
            f"Duplicate field name '{duplicates[0]}' in '{owner}'", SEMANTIC
        )


def extract_braced(text: str, open_index: int) -> Optional[str]:
    """
    Return the text between the brace at ``open_index`` and its partner.

    Returns None when the braces never balance.
    """
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[open_index + 1 : index]
    return None


def to_number(text: str) -> Optional[Union[int, float]]:
    """Parse an integer or decimal literal, or return None."""
    text = text.strip()
    if not _NUMBER_PATTERN.match(text):
        return None
    return float(text) if "." in text else int(text)


def strip_quotes(text: str) -> str:
    """Drop one pair of matching surrounding quotes."""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text


def type_listing(types) -> str:
    """Comma-separated type names in declaration order."""
    return ", ".join(t.value for t in FieldType if t in types)
