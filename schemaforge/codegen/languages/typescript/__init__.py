"""
TypeScript interface generator module.

Generates static type declarations with annotation doc comments.
"""

from .generator import TypeScriptGenerator, create_typescript_generator

__all__ = ["TypeScriptGenerator", "create_typescript_generator"]
