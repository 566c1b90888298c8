"""
Zod validator generator module.

Generates Zod object validators with chained constraints.
"""

from .generator import ZodGenerator, create_zod_generator

__all__ = ["ZodGenerator", "create_zod_generator"]
