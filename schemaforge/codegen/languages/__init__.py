"""
Target-specific code generators.

One subpackage per artifact: a Zod validator, a TypeScript interface,
a Mongoose model and a SQL table.
"""

from .zod import ZodGenerator, create_zod_generator
from .typescript import TypeScriptGenerator, create_typescript_generator
from .mongoose import MongooseGenerator, create_mongoose_generator
from .sql import SQLGenerator, create_sql_generator

__all__ = [
    "ZodGenerator",
    "TypeScriptGenerator",
    "MongooseGenerator",
    "SQLGenerator",
    "create_zod_generator",
    "create_typescript_generator",
    "create_mongoose_generator",
    "create_sql_generator",
]
