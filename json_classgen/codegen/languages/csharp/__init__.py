"""
C# code generator module.

Generates C# classes with auto-properties from inferred schemas.
"""

from .generator import CSharpGenerator, create_csharp_generator
from .config import CSHARP_TYPE_MAP, CSharpTypeMapper, create_csharp_type_mapper

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "CSHARP_TYPE_MAP",
    "CSharpTypeMapper",
    "create_csharp_type_mapper",
]
