"""
Mongoose code generator implementation.

Generates a document interface, a ``new Schema`` definition with
per-field clauses and the exported model.
"""

from typing import List, Optional
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
from ..typescript.generator import TypeScriptGenerator

MODEL_TEMPLATE = """import { Schema, model, Document } from 'mongoose';

export interface {{ name }}Document extends Document {{ interface_body }}

const {{ name }}Schema = new Schema<{{ name }}Document>({{ clause_body }}{% if timestamps %}, {
{{ indent }}timestamps: true
}{% endif %});

export const {{ name }} = model<{{ name }}Document>('{{ name }}', {{ name }}Schema);
"""

TYPE_TOKENS = {
    FieldType.STRING: "String",
    FieldType.NUMBER: "Number",
    FieldType.BOOLEAN: "Boolean",
    FieldType.DATE: "Date",
}

MIXED_TOKEN = "Schema.Types.Mixed"


def _quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


class MongooseGenerator(CodeGenerator):
    """Code generator for Mongoose models."""

    templates = {"model.ts.j2": MODEL_TEMPLATE}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Mongoose generator with configuration."""
        super().__init__(config)
        self.types = TypeScriptGenerator(self.config)

    @property
    def target_name(self) -> str:
        return "mongoose"

    @property
    def file_extension(self) -> str:
        return ".model.ts"

    def generate(self, schema: Schema) -> str:
        """Generate the model module for a schema."""
        context = {
            "name": schema.name,
            "interface_body": self.types.render_body(schema.fields),
            "clause_body": self._render_clause_body(schema.fields, 0),
            "timestamps": self.config.timestamps,
            "indent": self.pad(1),
        }
        return self.render_template("model.ts.j2", context)

    def _render_clause_body(self, fields, level: int) -> str:
        if not fields:
            return "{}"
        members = [
            f"{self.pad(level + 1)}{f.name}: {self.render_clause(f, level + 1)}"
            for f in fields
        ]
        return "{\n" + ",\n".join(members) + "\n" + self.pad(level) + "}"

    def render_clause(self, field: Field, level: int = 1) -> str:
        """Schema-definition clause for a field declared at ``level``."""
        return self.visit(field, level)

    def _typed_clause(self, token: str, field: Field) -> str:
        options = ", ".join([f"type: {token}"] + self._options(field))
        return "{ " + options + " }"

    def _options(self, field: Field) -> List[str]:
        validation = field.validation
        options = []

        if field.required:
            options.append("required: true")
        if field.unique:
            options.append("unique: true")

        is_string = field.type == FieldType.STRING
        if validation.min is not None:
            key = "minlength" if is_string else "min"
            options.append(f"{key}: {format_number(validation.min)}")
        if validation.max is not None:
            key = "maxlength" if is_string else "max"
            options.append(f"{key}: {format_number(validation.max)}")
        if validation.default is not None:
            default = _quote(validation.default) if is_string else validation.default
            options.append(f"default: {default}")

        return options

    # Clauses per shape

    def visit_primitive(self, field: Field, shape: Primitive, level: int) -> str:
        return self._typed_clause(TYPE_TOKENS[shape.kind], field)

    def visit_array(self, field: Field, shape: ArrayOf, level: int) -> str:
        element = field.element_field()
        if isinstance(element.shape, Primitive):
            token = TYPE_TOKENS[element.shape.kind]
        else:
            token = MIXED_TOKEN
        return "[{ type: " + token + " }]"

    def visit_object(self, field: Field, shape: ObjectOf, level: int) -> str:
        if not shape.fields:
            return self._typed_clause(MIXED_TOKEN, field)
        return self._render_clause_body(shape.fields, level)

    def visit_unknown(self, field: Field, shape: Unknown, level: int) -> str:
        return self._typed_clause(MIXED_TOKEN, field)


def create_mongoose_generator(timestamps: bool = True, **options) -> MongooseGenerator:
    """Create a Mongoose generator with default configuration."""
    from ...core.config import load_config

    config = load_config("mongoose", {"timestamps": timestamps, **options})
    return MongooseGenerator(config)
