"""
schemaforge code generation module.

Generates a validator, an interface and a persistence model from one
canonical schema.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    PersistenceFamily,
    RegistryError,
    get_generator,
    get_registry,
    get_target_info,
    list_all_target_info,
    list_supported_targets,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    run_generator,
)
from .core.schema import (
    Field,
    FieldType,
    GeneratedCode,
    Schema,
    ValidationOptions,
)
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def _target_config(config: ConfigLike, target: str, smart_defaults: bool) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return replace(config, smart_defaults=smart_defaults)
    if isinstance(config, (str, Path)):
        return load_config(target, {"smart_defaults": smart_defaults}, config_file=config)
    return load_config(target, {**(config or {}), "smart_defaults": smart_defaults})


def generate_code(
    schema: Schema,
    persistence: Union[PersistenceFamily, str] = PersistenceFamily.DOCUMENT,
    smart_defaults: bool = False,
    config: ConfigLike = None,
) -> GeneratedCode:
    """
    Generate all three artifacts for a schema.

    Args:
        schema: Canonical schema
        persistence: Document or relational model (name, alias or enum)
        smart_defaults: Synthesize bounds for unconstrained required strings
        config: Optional GeneratorConfig, override dict or JSON config path

    Returns:
        GeneratedCode with validator, interface and model strings

    Raises:
        ValueError: If the persistence family is unknown
    """
    family = PersistenceFamily.parse(persistence)

    artifacts = {}
    for slot, target in (
        ("validator", "zod"),
        ("interface", "typescript"),
        ("model", family.target),
    ):
        generator = get_generator(target, _target_config(config, target, smart_defaults))
        artifacts[slot] = generator.generate(schema)

    logger.debug(
        "Generated code for %s (persistence=%s, smart_defaults=%s)",
        schema.name,
        family.value,
        smart_defaults,
    )
    return GeneratedCode(**artifacts)


def generate_from_text(
    text: str,
    fmt: str = "auto",
    persistence: Union[PersistenceFamily, str] = PersistenceFamily.DOCUMENT,
    smart_defaults: bool = False,
    config: ConfigLike = None,
) -> GeneratedCode:
    """
    Parse source text and generate all artifacts from it.

    Raises:
        ParseError: If the text cannot be parsed
    """
    from ..parsers import parse_schema

    return generate_code(parse_schema(text, fmt), persistence, smart_defaults, config)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "PersistenceFamily",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "Schema",
    "Field",
    "FieldType",
    "ValidationOptions",
    "GeneratedCode",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_code",
    "generate_from_text",
    "run_generator",
    "get_generator",
    "get_registry",
    "get_target_info",
    "list_all_target_info",
    "list_supported_targets",
]
