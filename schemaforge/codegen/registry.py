"""
Generator registry system for managing available code generators.

Provides registration and instantiation of target generators, and maps
persistence families onto their model generator.
"""

from enum import Enum
from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class PersistenceFamily(Enum):
    """Which kind of persistence model to generate."""

    DOCUMENT = "document"
    RELATIONAL = "relational"

    @property
    def target(self) -> str:
        """Registry name of the model generator for this family."""
        return "mongoose" if self is PersistenceFamily.DOCUMENT else "sql"

    @classmethod
    def parse(cls, value: Union["PersistenceFamily", str]) -> "PersistenceFamily":
        """Resolve a family from its name or an alias (nosql, sql, ...)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _FAMILY_ALIASES:
            return _FAMILY_ALIASES[key]
        valid = ", ".join(sorted(_FAMILY_ALIASES))
        raise ValueError(f"Unknown persistence family: {value!r}. Expected one of: {valid}")


_FAMILY_ALIASES = {
    "document": PersistenceFamily.DOCUMENT,
    "nosql": PersistenceFamily.DOCUMENT,
    "mongoose": PersistenceFamily.DOCUMENT,
    "mongo": PersistenceFamily.DOCUMENT,
    "relational": PersistenceFamily.RELATIONAL,
    "sql": PersistenceFamily.RELATIONAL,
    "postgres": PersistenceFamily.RELATIONAL,
    "postgresql": PersistenceFamily.RELATIONAL,
}


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a target.

        Args:
            target: Primary target name (e.g., 'zod', 'sql')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this target
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        target_key = target.lower()

        # Already registered, skip silently
        if target_key in self._generators and not replace:
            return

        self._generators[target_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == target_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary target"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = target_key

    def unregister(self, target: str):
        """
        Unregister a generator and its aliases.

        Args:
            target: Target name to unregister
        """
        target_key = target.lower()
        self._generators.pop(target_key, None)

        aliases_to_remove = [
            alias for alias, primary in self._aliases.items() if primary == target_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, target: str) -> str:
        """Return the primary name for a target or alias."""
        target_key = target.lower()
        if target_key in self._generators:
            return target_key
        if target_key in self._aliases:
            return self._aliases[target_key]
        available = self.list_targets()
        raise RegistryError(
            f"No generator registered for target: {target}. "
            f"Available: {', '.join(available)}"
        )

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        """
        Get generator class for target.

        Raises:
            RegistryError: If target not found
        """
        return self._generators[self.resolve(target)]

    def create_generator(
        self,
        target: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for target.

        Args:
            target: Target name or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If generator creation fails
        """
        primary = self.resolve(target)
        generator_class = self._generators[primary]

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(primary, custom_config=config)
            elif config is None:
                final_config = load_config(primary)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return generator_class(final_config)

        except Exception as e:
            raise RegistryError(f"Failed to create {target} generator: {e}") from e

    def list_targets(self) -> List[str]:
        """Get list of registered primary target names."""
        return sorted(self._generators.keys())

    def get_aliases_for_target(self, target: str) -> List[str]:
        """Get all aliases for a specific target."""
        target_key = target.lower()
        return sorted(
            alias for alias, primary in self._aliases.items() if primary == target_key
        )

    def is_supported(self, target: str) -> bool:
        """Check if target is supported (by name or alias)."""
        target_key = target.lower()
        return target_key in self._generators or target_key in self._aliases

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Raises:
            RegistryError: If target not found
        """
        primary = self.resolve(target)
        generator_class = self._generators[primary]
        generator = generator_class(load_config(primary))

        return {
            "name": generator.target_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_target(primary),
            "module": generator_class.__module__,
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators with their aliases."""
    from .languages.zod import ZodGenerator
    from .languages.typescript import TypeScriptGenerator
    from .languages.mongoose import MongooseGenerator
    from .languages.sql import SQLGenerator

    registry.register("zod", ZodGenerator, aliases=["validator"])
    registry.register("typescript", TypeScriptGenerator, aliases=["ts", "interface"])
    registry.register("mongoose", MongooseGenerator, aliases=["mongo", "document"])
    registry.register("sql", SQLGenerator, aliases=["postgres", "relational"])


# Public API functions using the global registry


def get_generator(
    target: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(target, config)


def list_supported_targets() -> List[str]:
    """List all supported targets from global registry."""
    return get_registry().list_targets()


def is_target_supported(target: str) -> bool:
    """Check if target is supported by global registry."""
    return get_registry().is_supported(target)


def get_target_info(target: str) -> Dict[str, Any]:
    """Get information about a supported target."""
    return get_registry().get_target_info(target)


def list_all_target_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported targets."""
    return {target: get_target_info(target) for target in list_supported_targets()}
