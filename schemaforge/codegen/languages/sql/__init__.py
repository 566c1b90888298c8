"""
SQL table generator module.

Generates PostgreSQL DDL: table, unique indexes and an updated_at trigger.
"""

from .generator import SQLGenerator, create_sql_generator

__all__ = ["SQLGenerator", "create_sql_generator"]
