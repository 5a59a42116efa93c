"""
Naming utilities for code generation.

Record names are derived from JSON keys by capitalizing the first character.
Keys are otherwise passed through as-is; the helpers here only reject names
that cannot produce any declaration and keep record names unique.
"""

import re
from typing import Iterable, Set
from enum import Enum

from .schema import SchemaError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class EmptyIdentifierError(SchemaError):
    """Raised when a key or root name would produce an empty identifier."""

    pass


class NameCollisionError(SchemaError):
    """Raised when two records resolve to the same class name."""

    pass


class CollisionStrategy(Enum):
    """How to handle a record name that is already taken."""

    SUFFIX = "suffix"  # Address, Address2, Address3
    ERROR = "error"


def capitalize(value):
    """Upper-case the first character and leave the rest untouched.

    Non-string and empty inputs are returned unchanged.
    """
    if not isinstance(value, str) or not value:
        return value
    return value[0].upper() + value[1:]


def require_identifier(name: str, context: str) -> str:
    """Return ``name`` or raise if it is empty or blank.

    Args:
        name: Candidate class or field name.
        context: Where the name came from, for the error message.
    """
    if not isinstance(name, str) or not name.strip():
        raise EmptyIdentifierError(f"Empty identifier for {context}")
    return name


def is_identifier(name: str) -> bool:
    """Check for a plain ASCII identifier valid in every target language."""
    return bool(_IDENTIFIER_RE.match(name))


def resolve_record_name(
    name: str,
    taken: Iterable[str],
    strategy: CollisionStrategy = CollisionStrategy.SUFFIX,
) -> str:
    """Pick a class name for a new record.

    Args:
        name: Capitalized name derived from the owning key.
        taken: Names of records discovered so far.
        strategy: What to do when ``name`` is already used.

    Returns:
        ``name`` itself, or ``name`` with the first free numeric suffix.

    Raises:
        NameCollisionError: If the name is taken and strategy is ERROR.
    """
    used: Set[str] = set(taken)
    if name not in used:
        return name

    if strategy == CollisionStrategy.ERROR:
        raise NameCollisionError(f"Duplicate record name: {name}")

    counter = 2
    while f"{name}{counter}" in used:
        counter += 1
    return f"{name}{counter}"
