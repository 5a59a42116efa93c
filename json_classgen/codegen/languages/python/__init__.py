"""
Python code generator module.

Generates annotated Python classes with ``__init__`` from inferred schemas.
"""

from .generator import PythonGenerator, create_python_generator
from .config import PYTHON_TYPE_MAP, PythonTypeMapper, create_python_type_mapper
from .naming import PYTHON_RESERVED_WORDS

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "PYTHON_TYPE_MAP",
    "PythonTypeMapper",
    "create_python_type_mapper",
    "PYTHON_RESERVED_WORDS",
]
