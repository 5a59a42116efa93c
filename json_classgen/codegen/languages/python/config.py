"""
Python-specific configuration and type mappings.
"""

from typing import Any, Dict

from ...core.schema import PrimitiveKind
from ...core.types import TypeMapper

# Python type mappings
PYTHON_TYPE_MAP = {
    PrimitiveKind.STRING: "str",
    PrimitiveKind.NUMBER: "float",
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.UNKNOWN: "Any",
}

# Postponed evaluation lets the root class reference records defined below it
PYTHON_IMPORTS = [
    "from __future__ import annotations",
    "",
    "from typing import Any",
]


class PythonTypeMapper(TypeMapper):
    """Type mapper spelling sequences as builtin ``list[T]``."""

    sequence_format = "list[{}]"


def create_python_type_mapper(language_config: Dict[str, Any]) -> PythonTypeMapper:
    """Build the Python type mapper, applying configured type overrides."""
    type_map = dict(PYTHON_TYPE_MAP)
    type_map[PrimitiveKind.NUMBER] = language_config.get(
        "number_type", type_map[PrimitiveKind.NUMBER]
    )
    type_map[PrimitiveKind.UNKNOWN] = language_config.get(
        "unknown_type", type_map[PrimitiveKind.UNKNOWN]
    )
    return PythonTypeMapper(type_map)
