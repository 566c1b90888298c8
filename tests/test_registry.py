"""Tests for the generator registry and persistence families."""

import pytest

from schemaforge.codegen import (
    GeneratorConfig,
    PersistenceFamily,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_targets,
)
from schemaforge.codegen.registry import GeneratorRegistry, is_target_supported
from schemaforge.codegen.languages import (
    MongooseGenerator,
    SQLGenerator,
    TypeScriptGenerator,
    ZodGenerator,
)


def test_builtin_targets():
    assert list_supported_targets() == ["mongoose", "sql", "typescript", "zod"]


@pytest.mark.parametrize(
    "name, generator_class",
    [
        ("zod", ZodGenerator),
        ("validator", ZodGenerator),
        ("TS", TypeScriptGenerator),
        ("interface", TypeScriptGenerator),
        ("mongo", MongooseGenerator),
        ("document", MongooseGenerator),
        ("postgres", SQLGenerator),
        ("relational", SQLGenerator),
    ],
)
def test_aliases_resolve(name, generator_class):
    assert isinstance(get_generator(name), generator_class)
    assert is_target_supported(name)


def test_unknown_target():
    assert not is_target_supported("cobol")
    with pytest.raises(RegistryError, match="No generator registered for target: cobol"):
        get_generator("cobol")


def test_create_with_config_forms():
    assert get_generator("sql", {"table_suffix": "_t"}).config.table_suffix == "_t"
    config = GeneratorConfig(indent_size=6)
    assert get_generator("zod", config).config is config


def test_target_info():
    info = get_registry().get_target_info("mongo")
    assert info["name"] == "mongoose"
    assert info["file_extension"] == ".model.ts"
    assert info["class"] == "MongooseGenerator"
    assert info["aliases"] == ["document", "mongo"]


def test_register_rejects_non_generators():
    registry = GeneratorRegistry()
    with pytest.raises(RegistryError, match="must inherit from CodeGenerator"):
        registry.register("bogus", dict)


def test_alias_conflicts():
    registry = GeneratorRegistry()
    registry.register("zod", ZodGenerator, aliases=["validator"])
    with pytest.raises(RegistryError, match="already points to 'zod'"):
        registry.register("typescript", TypeScriptGenerator, aliases=["validator"])
    with pytest.raises(RegistryError, match="conflicts with existing primary target"):
        registry.register("sql", SQLGenerator, aliases=["zod"])


def test_unregister_drops_aliases():
    registry = GeneratorRegistry()
    registry.register("sql", SQLGenerator, aliases=["postgres"])
    registry.unregister("sql")
    assert not registry.is_supported("sql")
    assert not registry.is_supported("postgres")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("document", PersistenceFamily.DOCUMENT),
        ("NoSQL", PersistenceFamily.DOCUMENT),
        ("mongoose", PersistenceFamily.DOCUMENT),
        ("sql", PersistenceFamily.RELATIONAL),
        ("postgresql", PersistenceFamily.RELATIONAL),
        (PersistenceFamily.RELATIONAL, PersistenceFamily.RELATIONAL),
    ],
)
def test_persistence_family_parse(value, expected):
    assert PersistenceFamily.parse(value) is expected


def test_persistence_family_targets():
    assert PersistenceFamily.DOCUMENT.target == "mongoose"
    assert PersistenceFamily.RELATIONAL.target == "sql"
    with pytest.raises(ValueError):
        PersistenceFamily.parse("graph")
