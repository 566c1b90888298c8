"""
SQL code generator implementation.

Generates a PostgreSQL table with an auto-incrementing key, one column
per field, timestamp columns, unique indexes and an updated_at trigger.
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

TABLE_TEMPLATE = """{{ ("Create " ~ name ~ " table") | sql_comment }}
CREATE TABLE {{ table }} (
{{ columns | indent_lines(indent_size) }}
);{% if indexes %}

{{ "Create indexes for unique fields" | sql_comment }}
{{ indexes }}{% endif %}

{{ "Create updated_at trigger" | sql_comment }}
CREATE OR REPLACE FUNCTION update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
{{ indent }}NEW.updated_at = CURRENT_TIMESTAMP;
{{ indent }}RETURN NEW;
END;
$$ language 'plpgsql';

CREATE TRIGGER update_{{ table }}_updated_at
{{ indent }}BEFORE UPDATE ON {{ table }}
{{ indent }}FOR EACH ROW
{{ indent }}EXECUTE FUNCTION update_updated_at_column();
"""

PRIMARY_KEY_COLUMN = "id SERIAL PRIMARY KEY"
TIMESTAMP_COLUMNS = [
    "created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
    "updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
]


def _sql_string(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class SQLGenerator(CodeGenerator):
    """Code generator for relational table definitions."""

    templates = {"table.sql.j2": TABLE_TEMPLATE}

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize SQL generator with configuration."""
        super().__init__(config)

        self.primitive_types = {
            FieldType.NUMBER: self.config.decimal_type,
            FieldType.BOOLEAN: "BOOLEAN",
            FieldType.DATE: "TIMESTAMP",
        }

    @property
    def target_name(self) -> str:
        return "sql"

    @property
    def file_extension(self) -> str:
        return ".sql"

    def table_name(self, schema: Schema) -> str:
        return schema.name.lower() + self.config.table_suffix

    def generate(self, schema: Schema) -> str:
        """Generate the DDL script for a schema."""
        table = self.table_name(schema)

        columns = [PRIMARY_KEY_COLUMN]
        columns.extend(self.render_column(f) for f in schema.fields)
        columns.extend(TIMESTAMP_COLUMNS)

        indexes = [
            f"CREATE UNIQUE INDEX idx_{table}_{f.name} ON {table}({f.name});"
            for f in schema.fields
            if f.unique
        ]

        context = {
            "name": schema.name,
            "table": table,
            "columns": ",\n".join(columns),
            "indexes": "\n".join(indexes),
            "indent": self.pad(1),
            "indent_size": self.config.indent_size,
        }
        return self.render_template("table.sql.j2", context)

    def render_column(self, field: Field) -> str:
        """Column definition: name, type, then constraints."""
        parts = [field.name, self.visit(field)] + self.constraints(field)
        return " ".join(parts)

    def constraints(self, field: Field) -> List[str]:
        """NOT NULL, UNIQUE, DEFAULT, then CHECK bounds for numbers."""
        validation = field.validation
        result = []

        if field.required:
            result.append("NOT NULL")
        if field.unique:
            result.append("UNIQUE")

        if validation.default is not None:
            if field.type == FieldType.STRING:
                default = _sql_string(validation.default)
            else:
                default = validation.default
            result.append(f"DEFAULT {default}")

        if field.type == FieldType.NUMBER:
            if validation.min is not None:
                result.append(f"CHECK ({field.name} >= {format_number(validation.min)})")
            if validation.max is not None:
                result.append(f"CHECK ({field.name} <= {format_number(validation.max)})")

        return result

    # Column types per shape

    def visit_primitive(self, field: Field, shape: Primitive, level: int) -> str:
        if shape.kind == FieldType.STRING:
            width = field.validation.max
            if not isinstance(width, (int, float)) or width <= 0:
                width = self.config.string_column_width
            return f"VARCHAR({format_number(width)})"
        return self.primitive_types[shape.kind]

    def visit_array(self, field: Field, shape: ArrayOf, level: int) -> str:
        return self.config.json_column_type

    def visit_object(self, field: Field, shape: ObjectOf, level: int) -> str:
        return self.config.json_column_type

    def visit_unknown(self, field: Field, shape: Unknown, level: int) -> str:
        return self.config.fallback_column_type


def create_sql_generator(**options) -> SQLGenerator:
    """Create a SQL generator with default configuration."""
    from ...core.config import load_config

    config = load_config("sql", options)
    return SQLGenerator(config)
