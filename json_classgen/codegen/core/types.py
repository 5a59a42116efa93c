"""
Language-neutral type mapping.

Each target subclasses :class:`TypeMapper` with its own primitive spellings
and sequence syntax; the walk over the schema tree lives here only.
"""

from typing import Dict

from .schema import Collection, Primitive, PrimitiveKind, Record, TypeNode


class TypeMapper:
    """Render schema nodes as type names of one target language."""

    # "{}" is replaced with the rendered element type
    sequence_format: str = "List<{}>"

    def __init__(self, primitive_types: Dict[PrimitiveKind, str]):
        missing = set(PrimitiveKind) - set(primitive_types)
        if missing:
            names = ", ".join(sorted(kind.value for kind in missing))
            raise ValueError(f"No type configured for primitive kind(s): {names}")
        self.primitive_types = dict(primitive_types)

    @property
    def unknown_type(self) -> str:
        return self.primitive_types[PrimitiveKind.UNKNOWN]

    def map_type(self, node: TypeNode) -> str:
        """Render the type of a field."""
        if isinstance(node, Primitive):
            return self.primitive_types[node.kind]
        if isinstance(node, Record):
            return node.name
        if isinstance(node, Collection):
            return self.sequence_format.format(self.map_element_type(node.element))
        raise TypeError(f"Unhandled type node: {node!r}")

    def map_element_type(self, node: TypeNode) -> str:
        """Render a type used as a sequence's type argument."""
        return self.map_type(node)
