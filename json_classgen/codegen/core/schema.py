"""
Core schema representation for code generation.

The analyzer turns a sample JSON value into these immutable nodes once;
every language generator renders the same tree.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union
from enum import Enum


class SchemaError(Exception):
    """Base exception for schema inference failures."""

    pass


class PrimitiveKind(Enum):
    """Primitive value kinds detected in sample JSON."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"  # null, or nothing to infer from


@dataclass(frozen=True)
class Primitive:
    """A scalar value."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class Field:
    """A single ``key: type`` member of a record."""

    key: str
    type: "TypeNode"


@dataclass(frozen=True)
class Record:
    """Named aggregate built from one JSON object."""

    name: str
    fields: Tuple[Field, ...] = field(default_factory=tuple)

    def get_field(self, key: str) -> Optional[Field]:
        """Get field by its JSON key."""
        for item in self.fields:
            if item.key == key:
                return item
        return None

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(item.key for item in self.fields)


@dataclass(frozen=True)
class Collection:
    """Homogeneous sequence; the element comes from the first array item."""

    element: "TypeNode"


TypeNode = Union[Primitive, Record, Collection]


@dataclass(frozen=True)
class Schema:
    """Result of one inference run.

    ``records`` lists every record in the order it was discovered, which is
    also the order classes are emitted in.
    """

    root: TypeNode
    root_name: str
    records: Tuple[Record, ...] = field(default_factory=tuple)

    @property
    def root_record(self) -> Optional[Record]:
        """The record rendered as the module's root class, if there is one."""
        if isinstance(self.root, Record):
            return self.root
        if isinstance(self.root, Collection) and isinstance(
            self.root.element, Record
        ):
            return self.root.element
        return None

    def get_record(self, name: str) -> Optional[Record]:
        """Get record by its class name."""
        for record in self.records:
            if record.name == name:
                return record
        return None

    def with_root_name(self, name: str) -> "Schema":
        """Return a copy whose root record carries ``name``.

        Raises:
            SchemaError: If there is no root record, or another record
                already uses ``name``.
        """
        root_record = self.root_record
        if root_record is None:
            raise SchemaError("Schema has no root record to rename")
        if name == root_record.name:
            return self
        if self.get_record(name) is not None:
            raise SchemaError(f"Record name '{name}' is already in use")

        renamed = replace(root_record, name=name)
        if isinstance(self.root, Collection):
            root: TypeNode = Collection(element=renamed)
        else:
            root = renamed

        records = tuple(
            renamed if record is root_record else record for record in self.records
        )
        return Schema(root=root, root_name=name, records=records)


def iter_unknown_fields(record: Record):
    """Yield ``(field, is_collection)`` for members typed as unknown."""
    for item in record.fields:
        if isinstance(item.type, Primitive) and item.type.kind == PrimitiveKind.UNKNOWN:
            yield item, False
        elif (
            isinstance(item.type, Collection)
            and isinstance(item.type.element, Primitive)
            and item.type.element.kind == PrimitiveKind.UNKNOWN
        ):
            yield item, True
