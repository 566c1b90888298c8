"""
schemaforge reverse parsers.

Read a schema back from a JSON description, a TypeScript interface or a
Mongoose model definition.
"""

import re
from typing import Dict, List, Type

from .base import SEMANTIC, SYNTAX, ParseError, SchemaParser
from .examples import EXAMPLE_TEMPLATES
from .mongoose import DocumentModelParser
from .structured import StructuredTextParser
from .typescript import TypeDeclarationParser
from ..codegen.core.schema import Schema
from ..logging_config import get_logger

logger = get_logger(__name__)

PARSERS: Dict[str, Type[SchemaParser]] = {
    "json": StructuredTextParser,
    "typescript": TypeDeclarationParser,
    "mongoose": DocumentModelParser,
}

FORMAT_ALIASES = {
    "json": "json",
    "schema": "json",
    "typescript": "typescript",
    "ts": "typescript",
    "interface": "typescript",
    "mongoose": "mongoose",
    "mongo": "mongoose",
    "model": "mongoose",
}

_TYPESCRIPT_MARKER = re.compile(r"\binterface\s|\btype\s")


def list_formats() -> List[str]:
    return list(PARSERS)


def detect_format(text: str) -> str:
    """Guess the source format of ``text``: mongoose, typescript or json."""
    # Markers may appear inside JSON string values
    if text.lstrip().startswith("{"):
        return "json"
    if "new Schema" in text or "new mongoose.Schema" in text:
        return "mongoose"
    if _TYPESCRIPT_MARKER.search(text):
        return "typescript"
    return "json"


def get_parser(fmt: str) -> SchemaParser:
    """Parser instance for a format name or alias.

    Raises:
        ValueError: If the format is unknown
    """
    key = FORMAT_ALIASES.get(fmt.strip().lower())
    if key is None:
        raise ValueError(
            f"Unknown input format: {fmt!r}. Expected one of: auto, "
            + ", ".join(sorted(FORMAT_ALIASES))
        )
    return PARSERS[key]()


def parse_schema(text: str, fmt: str = "auto") -> Schema:
    """
    Parse source text into a Schema.

    Args:
        text: Source text
        fmt: 'auto' to detect, or a format name/alias

    Returns:
        Parsed Schema

    Raises:
        ParseError: If the text cannot be parsed
        ValueError: If the format is unknown
    """
    if fmt == "auto":
        fmt = detect_format(text)
        logger.debug("Detected input format: %s", fmt)
    return get_parser(fmt).parse(text)


__all__ = [
    "SYNTAX",
    "SEMANTIC",
    "ParseError",
    "SchemaParser",
    "StructuredTextParser",
    "TypeDeclarationParser",
    "DocumentModelParser",
    "EXAMPLE_TEMPLATES",
    "detect_format",
    "get_parser",
    "list_formats",
    "parse_schema",
]
