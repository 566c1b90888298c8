"""
TypeScript code generator implementation.

Generates an exported interface with optional members and
annotation doc comments.
"""

from typing import List, Optional, Tuple
from ...core.generator import CodeGenerator, format_number
from ...core.config import GeneratorConfig
from ...core.schema import (
    ArrayOf,
    Field,
    FieldType,
    ObjectOf,
    Primitive,
    Schema,
    Unknown,
)

INTERFACE_TEMPLATE = """export interface {{ name }} {{ body }}
"""

TYPE_NAMES = {
    FieldType.STRING: "string",
    FieldType.NUMBER: "number",
    FieldType.BOOLEAN: "boolean",
    FieldType.DATE: "Date",
}

RECORD_TYPE = "Record<string, any>"
ANY_TYPE = "any"


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    templates = {"interface.ts.j2": INTERFACE_TEMPLATE}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)
        self.add_comments = self.config.add_comments

    @property
    def target_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def generate(self, schema: Schema) -> str:
        """Generate the interface declaration for a schema."""
        context = {
            "name": schema.name,
            "body": self.render_body(schema.fields, with_comments=self.add_comments),
        }
        return self.render_template("interface.ts.j2", context)

    def render_body(
        self, fields: Tuple[Field, ...], level: int = 0, with_comments: bool = False
    ) -> str:
        """Brace-delimited member list; members sit one level below ``level``."""
        lines = []
        for f in fields:
            if with_comments:
                comment = self.render_comment(f)
                if comment:
                    lines.append(f"{self.pad(level + 1)}{comment}")
            lines.append(self.render_member(f, level + 1))
        if not lines:
            return "{\n" + self.pad(level) + "}"
        return "{\n" + "\n".join(lines) + "\n" + self.pad(level) + "}"

    def render_member(self, field: Field, level: int) -> str:
        optional = "" if field.required else "?"
        return f"{self.pad(level)}{field.name}{optional}: {self.render_type(field, level)};"

    def render_type(self, field: Field, level: int = 1) -> str:
        """Type expression for a member declared at ``level``."""
        return self.visit(field, level)

    def render_comment(self, field: Field) -> Optional[str]:
        """Doc comment listing annotations, or None when there are none."""
        annotations = self.annotations(field)
        if not annotations:
            return None
        # A literal comment terminator in a value would close the comment early
        text = " ".join(annotations).replace("*/", "*\\/")
        return f"/** {text} */"

    @staticmethod
    def annotations(field: Field) -> List[str]:
        """Annotations in fixed order: unique, min, max, pattern, default."""
        validation = field.validation
        result = []
        if field.unique:
            result.append("@unique")
        if validation.min is not None:
            result.append(f"@min {format_number(validation.min)}")
        if validation.max is not None:
            result.append(f"@max {format_number(validation.max)}")
        if validation.regex:
            result.append(f"@pattern {validation.regex}")
        if validation.default is not None:
            result.append(f"@default {validation.default}")
        return result

    # Types per shape

    def visit_primitive(self, field: Field, shape: Primitive, level: int) -> str:
        return TYPE_NAMES[shape.kind]

    def visit_array(self, field: Field, shape: ArrayOf, level: int) -> str:
        return f"{self.visit(field.element_field(), level)}[]"

    def visit_object(self, field: Field, shape: ObjectOf, level: int) -> str:
        if not shape.fields:
            return RECORD_TYPE
        return self.render_body(shape.fields, level)

    def visit_unknown(self, field: Field, shape: Unknown, level: int) -> str:
        return ANY_TYPE


def create_typescript_generator(add_comments: bool = True, **options) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    from ...core.config import load_config

    config = load_config("typescript", {"add_comments": add_comments, **options})
    return TypeScriptGenerator(config)
