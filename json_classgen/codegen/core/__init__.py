"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    UnsupportedRootValueError,
    generate_code,
)
from .schema import (
    Schema,
    SchemaError,
    Record,
    Field,
    Collection,
    Primitive,
    PrimitiveKind,
    TypeNode,
)
from .naming import (
    CollisionStrategy,
    EmptyIdentifierError,
    NameCollisionError,
    capitalize,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import TypeMapper

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "UnsupportedRootValueError",
    "generate_code",
    # Schema tree
    "Schema",
    "SchemaError",
    "Record",
    "Field",
    "Collection",
    "Primitive",
    "PrimitiveKind",
    "TypeNode",
    # Naming
    "CollisionStrategy",
    "EmptyIdentifierError",
    "NameCollisionError",
    "capitalize",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Templates and types
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "TypeMapper",
]
