"""
Mongoose model generator module.

Generates a document interface, a schema definition and a model export.
"""

from .generator import MongooseGenerator, create_mongoose_generator

__all__ = ["MongooseGenerator", "create_mongoose_generator"]
