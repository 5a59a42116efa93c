"""
Java code generator module.

Generates Java classes with getter/setter accessors from inferred schemas.
"""

from .generator import JavaGenerator, create_java_generator
from .config import JAVA_TYPE_MAP, JavaTypeMapper, create_java_type_mapper
from .naming import JAVA_RESERVED_WORDS

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "JAVA_TYPE_MAP",
    "JavaTypeMapper",
    "create_java_type_mapper",
    "JAVA_RESERVED_WORDS",
]
