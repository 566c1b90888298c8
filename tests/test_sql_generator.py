"""Tests for the relational (SQL) model generator."""

from schemaforge.codegen.core.schema import Field, Schema
from schemaforge.codegen.languages.sql import SQLGenerator, create_sql_generator

TRIGGER = (
    "-- Create updated_at trigger\n"
    "CREATE OR REPLACE FUNCTION update_updated_at_column()\n"
    "RETURNS TRIGGER AS $$\n"
    "BEGIN\n"
    "  NEW.updated_at = CURRENT_TIMESTAMP;\n"
    "  RETURN NEW;\n"
    "END;\n"
    "$$ language 'plpgsql';\n"
    "\n"
    "CREATE TRIGGER update_users_updated_at\n"
    "  BEFORE UPDATE ON users\n"
    "  FOR EACH ROW\n"
    "  EXECUTE FUNCTION update_updated_at_column();"
)


def column(field):
    return SQLGenerator().render_column(field)


def test_table_script(user_schema):
    code = create_sql_generator().generate(user_schema)
    assert code == (
        "-- Create User table\n"
        "CREATE TABLE users (\n"
        "  id SERIAL PRIMARY KEY,\n"
        "  email VARCHAR(255) NOT NULL UNIQUE,\n"
        "  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,\n"
        "  updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP\n"
        ");\n"
        "\n"
        "-- Create indexes for unique fields\n"
        "CREATE UNIQUE INDEX idx_users_email ON users(email);\n"
        "\n" + TRIGGER
    )


def test_no_index_section_without_unique_fields(product_schema):
    code = create_sql_generator().generate(product_schema)
    assert "CREATE TABLE products (" in code
    assert "  tags JSONB,\n" in code
    assert "CREATE UNIQUE INDEX" not in code
    assert ");\n\n-- Create updated_at trigger" in code


def test_column_types(full_schema):
    code = create_sql_generator().generate(full_schema)
    assert "  username VARCHAR(20) NOT NULL UNIQUE," in code
    assert "  bio VARCHAR(255)," in code
    assert "  age DECIMAL(10,2) CHECK (age >= 0) CHECK (age <= 130)," in code
    assert "  active BOOLEAN NOT NULL DEFAULT true," in code
    assert "  joined TIMESTAMP NOT NULL," in code
    assert "  scores JSONB," in code
    assert "  meta JSONB," in code


def test_string_default_is_quoted():
    field = Field(name="owner", type="string", validation={"default": "O'Brien"})
    assert column(field) == "owner VARCHAR(255) DEFAULT 'O''Brien'"


def test_string_bounds_do_not_become_checks():
    field = Field(name="code", type="string", validation={"min": 2, "max": 0})
    assert column(field) == "code VARCHAR(255)"


def test_unknown_type_falls_back_to_text():
    assert column(Field(name="blob", type="binary")) == "blob TEXT"


def test_configurable_types():
    generator = create_sql_generator(
        decimal_type="NUMERIC", json_column_type="JSON", table_suffix=""
    )
    schema = Schema(
        name="Item",
        fields=[Field(name="price", type="number"), Field(name="meta", type="object")],
    )
    code = generator.generate(schema)
    assert "CREATE TABLE item (" in code
    assert "  price NUMERIC," in code
    assert "  meta JSON," in code


def test_empty_schema():
    code = SQLGenerator().generate(Schema(name="Empty"))
    assert (
        "CREATE TABLE emptys (\n"
        "  id SERIAL PRIMARY KEY,\n"
        "  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,\n"
    ) in code
