"""Shared fixtures for schemaforge tests."""

import pytest

from schemaforge.codegen import Field, FieldType, Schema


@pytest.fixture
def user_schema():
    return Schema(
        name="User",
        fields=[Field(name="email", type="string", required=True, unique=True)],
    )


@pytest.fixture
def product_schema():
    return Schema(
        name="Product",
        fields=[Field(name="tags", type="array", array_type="string", required=False)],
    )


@pytest.fixture
def nested_schema():
    """Object field holding two levels of nested objects."""
    geo = Field(
        name="geo",
        type=FieldType.OBJECT,
        required=True,
        object_fields=[Field(name="lat", type="number", required=True)],
    )
    address = Field(
        name="address",
        type=FieldType.OBJECT,
        required=True,
        object_fields=[Field(name="street", type="string", required=True), geo],
    )
    return Schema(name="Place", fields=[address])


@pytest.fixture
def full_schema():
    return Schema(
        name="Account",
        fields=[
            Field(
                name="username",
                type="string",
                required=True,
                unique=True,
                validation={"min": 3, "max": 20, "regex": "^[a-z]+$"},
            ),
            Field(name="bio", type="string"),
            Field(name="age", type="number", validation={"min": 0, "max": 130}),
            Field(name="active", type="boolean", required=True, validation={"default": True}),
            Field(name="joined", type="date", required=True),
            Field(name="scores", type="array", array_type="number"),
            Field(name="meta", type="object"),
        ],
    )


def max_brace_depth(text: str) -> int:
    depth = deepest = 0
    for char in text:
        if char == "{":
            depth += 1
            deepest = max(deepest, depth)
        elif char == "}":
            depth -= 1
    return deepest


@pytest.fixture
def brace_depth():
    return max_brace_depth
