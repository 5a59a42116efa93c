"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaGenerator, create_java_generator
from .python import PythonGenerator, create_python_generator
from .csharp import CSharpGenerator, create_csharp_generator

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "PythonGenerator",
    "create_python_generator",
    "CSharpGenerator",
    "create_csharp_generator",
]
