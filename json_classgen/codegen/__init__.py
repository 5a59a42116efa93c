"""
JSON class generation module.

Infers a schema from sample JSON once and renders it as class definitions
in any registered language.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    register_generator,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    UnsupportedRootValueError,
    generate_code,
)
from .core.schema import (
    Schema,
    SchemaError,
    Record,
    Field,
    Collection,
    Primitive,
    PrimitiveKind,
)
from .core.naming import (
    CollisionStrategy,
    EmptyIdentifierError,
    NameCollisionError,
    capitalize,
    require_identifier,
)
from .core.config import (
    GeneratorConfig,
    ConfigManager,
    ConfigError,
    get_config_manager,
    load_config,
)

__version__ = "0.1.0"

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def _resolve_config(
    config: ConfigLike, language: Optional[str] = None
) -> GeneratorConfig:
    """
    Turn any accepted config form into a validated GeneratorConfig.

    ``language`` scopes bare language settings such as ``number_type`` to
    that language's section.
    """
    scope = get_registry().resolve(language) if language else None
    if isinstance(config, GeneratorConfig):
        problems = get_config_manager().validate_config(config)
        if problems:
            raise ConfigError(f"Invalid configuration: {'; '.join(problems)}")
        return config
    if isinstance(config, (str, Path)):
        return load_config(scope, config_file=config)
    if isinstance(config, dict):
        return load_config(scope, custom_config=config)
    if config is None:
        return load_config(scope)
    raise ConfigError(f"Invalid config type: {type(config)}")


def infer(json_data: Any, root_name: str = "Root", config: ConfigLike = None) -> Schema:
    """
    Infer a schema using the inference settings of a configuration.

    Args:
        json_data: Parsed JSON value
        root_name: Name for the root class
        config: Configuration providing max_depth and name_collision

    Returns:
        Inferred Schema
    """
    from json_classgen.analyzer import infer_schema

    settings = _resolve_config(config)
    try:
        collision = CollisionStrategy(settings.name_collision)
    except ValueError as e:
        raise ConfigError(f"Invalid name_collision: {settings.name_collision}") from e

    return infer_schema(
        json_data,
        root_name,
        max_depth=settings.max_depth,
        collision=collision,
    )


def generate_from_schema(
    schema: Schema, language: str = "java", config: ConfigLike = None
) -> GenerationResult:
    """
    Generate code for one language from an already inferred schema.

    Generator failures are reported in the returned result.
    """
    generator = get_generator(language, config)
    return generate_code(generator, schema)


def generate_from_value(
    json_data: Any,
    language: str = "java",
    config: ConfigLike = None,
    root_name: str = "Root",
) -> GenerationResult:
    """
    Infer a schema from JSON data and generate code for one language.

    Args:
        json_data: Parsed JSON value
        language: Target language name or alias
        config: Generator configuration dict, path or GeneratorConfig
        root_name: Name for the root class

    Returns:
        GenerationResult with generated code

    Raises:
        SchemaError: If inference fails; no code is generated
    """
    settings = _resolve_config(config, language)
    schema = infer(json_data, root_name, settings)
    return generate_from_schema(schema, language, settings)


def generate_all(
    json_data: Any,
    languages: Optional[Iterable[str]] = None,
    config: ConfigLike = None,
    root_name: str = "Root",
) -> Dict[str, GenerationResult]:
    """
    Infer a schema once and generate code for several languages.

    One language failing does not affect the others.

    Args:
        json_data: Parsed JSON value
        languages: Target languages (defaults to every registered language)
        config: Generator configuration
        root_name: Name for the root class

    Returns:
        Dict mapping each requested language to its GenerationResult
    """
    # Shared settings only; each generator reads its own language section
    settings = _resolve_config(config)
    schema = infer(json_data, root_name, settings)
    targets = list(languages) if languages is not None else list_supported_languages()

    results = {}
    for language in targets:
        try:
            results[language] = generate_from_schema(schema, language, settings)
        except RegistryError as e:
            results[language] = GenerationResult.error(str(e), exception=e)
    return results


def emit(
    language: str,
    schema: Schema,
    root_name: Optional[str] = None,
    config: ConfigLike = None,
) -> str:
    """
    Render a schema as module text in one language.

    Args:
        language: Target language name or alias
        schema: Inferred schema
        root_name: Optional new name for the root class
        config: Generator configuration

    Returns:
        Generated code

    Raises:
        GeneratorError: If the schema cannot be rendered
    """
    if root_name is not None:
        require_identifier(root_name, "root name")
        # Unsupported roots are reported by the generator below
        if schema.root_record is not None:
            schema = schema.with_root_name(capitalize(root_name))

    generator = get_generator(language, config)
    return generator.format_code(generator.generate(schema))


def emit_java(schema: Schema, root_name: Optional[str] = None, config=None) -> str:
    """Render a schema as Java classes."""
    return emit("java", schema, root_name, config)


def emit_python(schema: Schema, root_name: Optional[str] = None, config=None) -> str:
    """Render a schema as Python classes."""
    return emit("python", schema, root_name, config)


def emit_csharp(schema: Schema, root_name: Optional[str] = None, config=None) -> str:
    """Render a schema as C# classes."""
    return emit("csharp", schema, root_name, config)


def quick_generate(json_data, language="java", root_name="Root", **options):
    """
    Quick code generation from JSON data.

    Args:
        json_data: JSON data (dict/list/str)
        language: Target language
        root_name: Name for the root class
        **options: Generator options

    Returns:
        Generated code string
    """
    if isinstance(json_data, str):
        from json_classgen.utils import parse_json_text

        json_data = parse_json_text(json_data)

    result = generate_from_value(json_data, language, options or None, root_name)

    if not result.success:
        raise GeneratorError(result.error_message)
    return result.code


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "UnsupportedRootValueError",
    "Schema",
    "SchemaError",
    "Record",
    "Field",
    "Collection",
    "Primitive",
    "PrimitiveKind",
    "CollisionStrategy",
    "EmptyIdentifierError",
    "NameCollisionError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "infer",
    "generate_from_schema",
    "generate_from_value",
    "generate_all",
    "emit",
    "emit_java",
    "emit_python",
    "emit_csharp",
    "quick_generate",
    "get_generator",
    "get_registry",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "register_generator",
]
