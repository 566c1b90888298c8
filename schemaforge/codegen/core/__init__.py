"""
Core code generation components.

Provides the canonical model, the base generator and the utilities
used by all target generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    ShapeVisitor,
    format_number,
    run_generator,
)
from .schema import (
    ARRAY_ELEMENT_TYPES,
    NESTED_OBJECT_TYPES,
    PRIMITIVE_TYPES,
    ArrayOf,
    Field,
    FieldType,
    GeneratedCode,
    ObjectOf,
    Primitive,
    Schema,
    Shape,
    Unknown,
    ValidationOptions,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "ShapeVisitor",
    "GeneratorError",
    "GenerationResult",
    "run_generator",
    "format_number",
    # Canonical model
    "Schema",
    "Field",
    "FieldType",
    "ValidationOptions",
    "GeneratedCode",
    "Shape",
    "Primitive",
    "ArrayOf",
    "ObjectOf",
    "Unknown",
    "PRIMITIVE_TYPES",
    "ARRAY_ELEMENT_TYPES",
    "NESTED_OBJECT_TYPES",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
