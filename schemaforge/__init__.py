"""
schemaforge: one schema, many artifacts.

Parse a schema from JSON, a TypeScript interface or a Mongoose model, and
generate a Zod validator, a TypeScript interface and a Mongoose or SQL
model from it.
"""

__version__ = "0.1.0"

from .codegen import (
    Field,
    FieldType,
    GeneratedCode,
    PersistenceFamily,
    Schema,
    ValidationOptions,
    generate_code,
    generate_from_text,
)
from .parsers import ParseError, detect_format, parse_schema

__all__ = [
    "__version__",
    "Field",
    "FieldType",
    "GeneratedCode",
    "PersistenceFamily",
    "Schema",
    "ValidationOptions",
    "ParseError",
    "detect_format",
    "generate_code",
    "generate_from_text",
    "parse_schema",
]
