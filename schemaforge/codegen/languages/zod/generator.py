"""
Zod code generator implementation.

Generates a ``z.object`` validator and its inferred type from a schema.
"""

import json
import re
from typing import Optional
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

ZOD_FILE_TEMPLATE = """import { z } from 'zod';

export const {{ name }}Schema = z.object({{ body }});

export type {{ name }} = z.infer<typeof {{ name }}Schema>;
"""

BASE_VALIDATORS = {
    FieldType.STRING: "z.string()",
    FieldType.NUMBER: "z.number()",
    FieldType.BOOLEAN: "z.boolean()",
    FieldType.DATE: "z.date()",
}

ANY_OBJECT_VALIDATOR = "z.record(z.string(), z.any())"
ANY_VALIDATOR = "z.any()"


def _regex_literal(pattern: str) -> str:
    """JavaScript regex literal with unescaped slashes escaped."""
    return "/" + re.sub(r"(?<!\\)/", r"\\/", pattern) + "/"


class ZodGenerator(CodeGenerator):
    """Code generator for Zod runtime validators."""

    templates = {"schema.ts.j2": ZOD_FILE_TEMPLATE}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Zod generator with configuration."""
        super().__init__(config)
        self.smart_defaults = self.config.smart_defaults

    @property
    def target_name(self) -> str:
        return "zod"

    @property
    def file_extension(self) -> str:
        return ".schema.ts"

    def generate(self, schema: Schema) -> str:
        """Generate the validator module for a schema."""
        context = {
            "name": schema.name,
            "body": self._render_object_body(schema.fields, 0),
        }
        return self.render_template("schema.ts.j2", context)

    def _render_object_body(self, fields, level: int) -> str:
        if not fields:
            return "{}"
        members = [self.render_member(f, level + 1) for f in fields]
        return "{\n" + ",\n".join(members) + "\n" + self.pad(level) + "}"

    def render_member(self, field: Field, level: int) -> str:
        """One ``name: validator`` line of an object validator."""
        return f"{self.pad(level)}{field.name}: {self.render_validator(field, level)}"

    def render_validator(self, field: Field, level: int = 1) -> str:
        """Full validator expression: base call, constraints, optionality."""
        expression = self.visit(field, level) + self._constraint_chain(field)
        if not field.required:
            expression += ".optional()"
        return expression

    # Base validators per shape

    def visit_primitive(self, field: Field, shape: Primitive, level: int) -> str:
        return BASE_VALIDATORS[shape.kind]

    def visit_array(self, field: Field, shape: ArrayOf, level: int) -> str:
        # Elements carry no constraints of their own
        element = self.visit(field.element_field(), level)
        return f"z.array({element})"

    def visit_object(self, field: Field, shape: ObjectOf, level: int) -> str:
        if not shape.fields:
            return ANY_OBJECT_VALIDATOR
        return f"z.object({self._render_object_body(shape.fields, level)})"

    def visit_unknown(self, field: Field, shape: Unknown, level: int) -> str:
        return ANY_VALIDATOR

    # Constraints

    def _constraint_chain(self, field: Field) -> str:
        """Qualifier calls in fixed order: min, max, regex, default."""
        validation = field.validation
        chain = []

        if field.type == FieldType.STRING:
            if (
                self.smart_defaults
                and field.required
                and validation.min is None
                and validation.max is None
            ):
                chain.append(
                    f'.min({self.config.smart_min}, "{field.name} is required")'
                )
                chain.append(
                    f'.max({self.config.smart_max}, "{field.name} is too long")'
                )
            else:
                if validation.min is not None:
                    message = f', "{field.name} is required"' if self.smart_defaults else ""
                    chain.append(f".min({format_number(validation.min)}{message})")
                if validation.max is not None:
                    message = f', "{field.name} is too long"' if self.smart_defaults else ""
                    chain.append(f".max({format_number(validation.max)}{message})")
            if validation.regex:
                chain.append(f".regex({_regex_literal(validation.regex)})")
        else:
            if validation.min is not None:
                chain.append(f".min({format_number(validation.min)})")
            if validation.max is not None:
                chain.append(f".max({format_number(validation.max)})")

        if validation.default is not None:
            if field.type == FieldType.STRING:
                default = json.dumps(validation.default)
            else:
                default = validation.default
            chain.append(f".default({default})")

        return "".join(chain)


def create_zod_generator(smart_defaults: bool = False, **options) -> ZodGenerator:
    """Create a Zod generator with default configuration."""
    from ...core.config import load_config

    config = load_config("zod", {"smart_defaults": smart_defaults, **options})
    return ZodGenerator(config)
