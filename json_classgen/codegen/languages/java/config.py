"""
Java-specific configuration and type mappings.
"""

from typing import Any, Dict

from ...core.schema import PrimitiveKind, TypeNode
from ...core.types import TypeMapper

# Java type mappings
JAVA_TYPE_MAP = {
    PrimitiveKind.STRING: "String",
    PrimitiveKind.NUMBER: "double",
    PrimitiveKind.BOOLEAN: "boolean",
    PrimitiveKind.UNKNOWN: "Object",
}

# Generic type arguments cannot be primitives
JAVA_BOXED_TYPES = {
    "boolean": "Boolean",
    "byte": "Byte",
    "char": "Character",
    "double": "Double",
    "float": "Float",
    "int": "Integer",
    "long": "Long",
    "short": "Short",
}

JAVA_IMPORTS = ["import java.util.List;"]


class JavaTypeMapper(TypeMapper):
    """Type mapper spelling sequences as ``List<T>`` with boxed elements."""

    sequence_format = "List<{}>"

    def map_element_type(self, node: TypeNode) -> str:
        rendered = super().map_element_type(node)
        return JAVA_BOXED_TYPES.get(rendered, rendered)


def create_java_type_mapper(language_config: Dict[str, Any]) -> JavaTypeMapper:
    """Build the Java type mapper, applying configured type overrides."""
    type_map = dict(JAVA_TYPE_MAP)
    type_map[PrimitiveKind.NUMBER] = language_config.get(
        "number_type", type_map[PrimitiveKind.NUMBER]
    )
    type_map[PrimitiveKind.UNKNOWN] = language_config.get(
        "unknown_type", type_map[PrimitiveKind.UNKNOWN]
    )
    return JavaTypeMapper(type_map)
