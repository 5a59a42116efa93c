"""
C#-specific configuration and type mappings.
"""

from typing import Any, Dict

from ...core.schema import PrimitiveKind
from ...core.types import TypeMapper

# C# type mappings
CSHARP_TYPE_MAP = {
    PrimitiveKind.STRING: "string",
    PrimitiveKind.NUMBER: "double",
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.UNKNOWN: "object",
}

CSHARP_USINGS = ["using System.Collections.Generic;"]


class CSharpTypeMapper(TypeMapper):
    """Type mapper spelling sequences as ``List<T>``."""

    sequence_format = "List<{}>"


def create_csharp_type_mapper(language_config: Dict[str, Any]) -> CSharpTypeMapper:
    """Build the C# type mapper, applying configured type overrides."""
    type_map = dict(CSHARP_TYPE_MAP)
    type_map[PrimitiveKind.NUMBER] = language_config.get(
        "number_type", type_map[PrimitiveKind.NUMBER]
    )
    type_map[PrimitiveKind.UNKNOWN] = language_config.get(
        "unknown_type", type_map[PrimitiveKind.UNKNOWN]
    )
    return CSharpTypeMapper(type_map)
