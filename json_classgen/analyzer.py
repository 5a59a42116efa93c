"""Schema inference from a sample JSON value.

Only the first element of an array is looked at; the shape of one sample is
all the generators get.
"""

from typing import Any, Tuple

from .codegen.core.naming import (
    CollisionStrategy,
    capitalize,
    require_identifier,
    resolve_record_name,
)
from .codegen.core.schema import (
    Collection,
    Field,
    Primitive,
    PrimitiveKind,
    Record,
    Schema,
    SchemaError,
    TypeNode,
)
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 100


class RecursionDepthExceededError(SchemaError):
    """Raised when the input nests deeper than the configured maximum."""

    def __init__(self, max_depth: int):
        super().__init__(f"JSON nesting exceeds maximum depth of {max_depth}")
        self.max_depth = max_depth


def map_primitive(value: Any) -> PrimitiveKind:
    """Classify a scalar value."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return PrimitiveKind.BOOLEAN
    if isinstance(value, str):
        return PrimitiveKind.STRING
    if isinstance(value, (int, float)):
        return PrimitiveKind.NUMBER
    return PrimitiveKind.UNKNOWN


def infer_schema(
    value: Any,
    root_name: str = "Root",
    max_depth: int = DEFAULT_MAX_DEPTH,
    collision: CollisionStrategy = CollisionStrategy.SUFFIX,
) -> Schema:
    """Infer a schema tree from a parsed JSON value.

    Args:
        value: Output of ``json.loads`` (dict, list, str, int, float, bool
            or None).
        root_name: Name of the top-level record.
        max_depth: Deepest container nesting accepted.
        collision: Policy for records whose names are already taken.

    Returns:
        Schema with the root node and every record in discovery order.

    Raises:
        EmptyIdentifierError: If the root name or any object key is blank.
        NameCollisionError: On a duplicate record name with ERROR strategy.
        RecursionDepthExceededError: If nesting exceeds ``max_depth``.
    """
    require_identifier(root_name, "root name")

    def infer_node(
        node: Any, name: str, depth: int, taken: Tuple[str, ...]
    ) -> Tuple[TypeNode, Tuple[Record, ...]]:
        if depth > max_depth:
            raise RecursionDepthExceededError(max_depth)

        if isinstance(node, dict):
            return infer_record(node, name, depth, taken)

        if isinstance(node, list):
            if not node:
                return Collection(Primitive(PrimitiveKind.UNKNOWN)), ()

            first = node[0]
            if isinstance(first, dict):
                element, records = infer_record(first, name, depth + 1, taken)
                return Collection(element), records
            if isinstance(first, list):
                # Arrays of arrays degrade to a sequence of the permissive type
                return Collection(Primitive(PrimitiveKind.UNKNOWN)), ()
            return Collection(Primitive(map_primitive(first))), ()

        return Primitive(map_primitive(node)), ()

    def infer_record(
        node: dict, name: str, depth: int, taken: Tuple[str, ...]
    ) -> Tuple[Record, Tuple[Record, ...]]:
        if depth > max_depth:
            raise RecursionDepthExceededError(max_depth)

        record_name = resolve_record_name(capitalize(name), taken, collision)
        taken = taken + (record_name,)

        fields = []
        discovered: Tuple[Record, ...] = ()
        for key, child in node.items():
            require_identifier(key, f"field of {record_name}")
            child_type, child_records = infer_node(child, key, depth + 1, taken)
            fields.append(Field(key=key, type=child_type))
            discovered += child_records
            taken += tuple(record.name for record in child_records)

        record = Record(name=record_name, fields=tuple(fields))
        return record, (record,) + discovered

    root, records = infer_node(value, root_name, 0, ())
    names = ", ".join(record.name for record in records) or "none"
    logger.debug(f"Inferred {len(records)} record(s) for root {root_name}: {names}")
    return Schema(root=root, root_name=capitalize(root_name), records=records)
