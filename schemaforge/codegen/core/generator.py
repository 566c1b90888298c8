"""
Base generator interface for all code generation targets.

Defines the contract that all target generators must implement.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Any, Optional, Tuple, Union
from .config import GeneratorConfig, load_config
from .schema import (
    ArrayOf,
    Field,
    FieldType,
    ObjectOf,
    Primitive,
    Schema,
    Unknown,
)
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


def format_number(value: Union[int, float]) -> str:
    """Render a numeric bound without a spurious trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ShapeVisitor(ABC):
    """
    Dispatches a field to one handler per shape variant.

    Subclasses implement every ``visit_*`` method; the branching on the
    variant happens here and nowhere else.
    """

    def visit(self, field: Field, level: int = 1) -> str:
        shape = field.shape
        if isinstance(shape, Primitive):
            return self.visit_primitive(field, shape, level)
        if isinstance(shape, ArrayOf):
            return self.visit_array(field, shape, level)
        if isinstance(shape, ObjectOf):
            return self.visit_object(field, shape, level)
        return self.visit_unknown(field, shape, level)

    @abstractmethod
    def visit_primitive(self, field: Field, shape: Primitive, level: int) -> str:
        pass

    @abstractmethod
    def visit_array(self, field: Field, shape: ArrayOf, level: int) -> str:
        pass

    @abstractmethod
    def visit_object(self, field: Field, shape: ObjectOf, level: int) -> str:
        pass

    @abstractmethod
    def visit_unknown(self, field: Field, shape: Unknown, level: int) -> str:
        pass


class CodeGenerator(ShapeVisitor):
    """Abstract base class for all code generators."""

    # In-memory Jinja2 templates, keyed by template name
    templates: Dict[str, str] = {}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config(self.target_name)
        self._template_engine = None

    @property
    @abstractmethod
    def target_name(self) -> str:
        """Return the registry name of this target (e.g., 'zod', 'sql')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.templates)
        return self._template_engine

    @abstractmethod
    def generate(self, schema: Schema) -> str:
        """
        Generate the artifact for a schema.

        Must return a string for every schema, including ones carrying
        malformed field types.
        """
        pass

    def pad(self, level: int) -> str:
        """Indentation for the given nesting level."""
        return self.config.indent * level

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Validate a schema for structural issues.

        Generation still succeeds for every schema; these are warnings only.

        Returns:
            List of warning messages (empty if no issues)
        """
        return _collect_warnings(schema.name, schema.fields)

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Strip trailing whitespace and collapse long blank runs
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n")

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


def _collect_warnings(owner: str, fields: Tuple[Field, ...]) -> List[str]:
    warnings = []

    counts = Counter(f.name for f in fields)
    for name, count in counts.items():
        if count > 1:
            warnings.append(f"Duplicate field name '{name}' in {owner} ({count} times)")

    for f in fields:
        path = f"{owner}.{f.name}"
        if not f.name:
            warnings.append(f"Field in {owner} has an empty name")
        elif not f.name.isidentifier():
            warnings.append(f"Field name {path} is not a valid identifier")

        shape = f.shape
        if isinstance(shape, Unknown):
            warnings.append(f"Unknown type in {path}: {shape.raw!r}")
        elif isinstance(shape, ArrayOf):
            if not isinstance(shape.element, FieldType):
                warnings.append(f"Unknown array element type in {path}: {shape.element!r}")
            elif shape.element == FieldType.ARRAY:
                warnings.append(f"Nested arrays are not supported in {path}")
        elif isinstance(shape, ObjectOf):
            if not shape.fields:
                warnings.append(
                    f"Object field {path} has no nested fields - will use a generic record"
                )
            warnings.extend(_collect_warnings(path, shape.fields))

    return warnings


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def run_generator(generator: CodeGenerator, schema: Schema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        code = generator.format_code(generator.generate(schema))

        metadata = {
            "target": generator.target_name,
            "file_extension": generator.file_extension,
            "schema": schema.name,
            "field_count": len(schema.fields),
            "max_depth": schema.get_max_depth(),
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Generation with %s failed: %s", generator.target_name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
