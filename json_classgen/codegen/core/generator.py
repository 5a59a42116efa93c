"""
Shared machinery of the language generators.

A generator renders every record of a Schema through its language's class
template and wraps the classes in the module template.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig
from .naming import is_identifier
from .schema import Collection, Field, Primitive, Record, Schema, iter_unknown_fields
from .templates import TemplateEngine, TemplateError, create_template_engine
from .types import TypeMapper

logger = get_logger(__name__)

_BLANK_RUN_RE = re.compile(r"\n{4,}")


class GeneratorError(Exception):
    """Raised when a schema cannot be rendered."""

    pass


class UnsupportedRootValueError(GeneratorError):
    """Raised when the root value has no object structure to model."""

    pass


class CodeGenerator(ABC):
    """Renders a Schema as one module of a target language."""

    # Text placed between two rendered classes
    class_separator: str = "\n\n"

    # Words that cannot be used as member names in the target language
    reserved_words: frozenset = frozenset()

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()
        self.type_mapper = self.create_type_mapper()

    def _setup_templates(self):
        self._template_engine = create_template_engine(self.get_template_directory())
        # Configured templates shadow the bundled files of the same name
        for name, source in self.language_config.get("templates", {}).items():
            self._template_engine.add_template(name, source)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java', '.py')."""
        pass

    @property
    def class_template_name(self) -> str:
        return f"class{self.file_extension}.j2"

    @property
    def module_template_name(self) -> str:
        return f"module{self.file_extension}.j2"

    def get_template_directory(self) -> Optional[Path]:
        """Directory holding this language's templates, or None for none."""
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def language_config(self) -> Dict[str, Any]:
        return self.config.settings_for(self.language_name)

    @abstractmethod
    def create_type_mapper(self) -> TypeMapper:
        """Build the type mapper for this language from configuration."""
        pass

    @abstractmethod
    def get_import_statements(self, schema: Schema) -> List[str]:
        """
        Get the module header lines.

        The header is fixed per language and emitted whether or not any
        field needs it.
        """
        pass

    @abstractmethod
    def build_field_data(self, field: Field) -> Dict[str, Any]:
        """Build the template context of one field."""
        pass

    def member_name(self, key: str) -> str:
        """Name a JSON key takes as a class member."""
        return key

    def build_class_context(self, record: Record) -> Dict[str, Any]:
        """Build the template context of one class."""
        return {
            "class_name": record.name,
            "fields": [self.build_field_data(item) for item in record.fields],
            "indent": self.config.indent,
        }

    def generate(self, schema: Schema) -> str:
        """
        Generate code for all records of a schema.

        The root class comes first, followed by every other record in the
        order inference discovered them.

        Raises:
            UnsupportedRootValueError: If the schema has no root record.
        """
        if schema.root_record is None:
            raise UnsupportedRootValueError(
                f"Cannot generate {self.language_name} classes: root value is "
                f"{_describe_node(schema.root)}, not an object"
            )

        classes = [self.generate_single_schema(record) for record in schema.records]
        context = {
            "imports": self.get_import_statements(schema),
            "classes": classes,
            "separator": self.class_separator,
        }
        code = self.render_template(self.module_template_name, context)
        logger.debug(
            f"Generated {len(classes)} {self.language_name} class(es) "
            f"for {schema.root_name}"
        )
        return code

    def generate_single_schema(self, record: Record) -> str:
        """Generate code for a single record."""
        context = self.build_class_context(record)
        return self.render_template(self.class_template_name, context).rstrip()

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Collect warnings about constructs that generate weakly typed
        or suspicious code.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for record in schema.records:
            if not record.fields:
                warnings.append(f"Record '{record.name}' has no fields")

            for item, is_collection in iter_unknown_fields(record):
                if is_collection:
                    warnings.append(
                        f"Array field {record.name}.{item.key} has no element type "
                        f"information - using {self.type_mapper.unknown_type}"
                    )
                else:
                    warnings.append(
                        f"Unknown type in {record.name}.{item.key} - using "
                        f"{self.type_mapper.unknown_type}"
                    )

            for item in record.fields:
                if not is_identifier(item.key):
                    warnings.append(
                        f"Field {record.name}.{item.key} is not a valid identifier"
                    )
                elif self.member_name(item.key) in self.reserved_words:
                    warnings.append(
                        f"Field {record.name}.{item.key} is a reserved word in "
                        f"{self.language_name}"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace: no trailing spaces, at most two consecutive
        blank lines, exactly one final newline.
        """
        text = "\n".join(line.rstrip() for line in code.split("\n")).strip("\n")
        return _BLANK_RUN_RE.sub("\n\n\n", text) + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)


def _describe_node(node) -> str:
    if isinstance(node, Primitive):
        return f"a {node.kind.value} primitive"
    if isinstance(node, Collection):
        if isinstance(node.element, Primitive):
            return f"an array of {node.element.kind.value} values"
        return "an array without object elements"
    return type(node).__name__


@dataclass
class GenerationResult:
    """Outcome of generating one language; failures carry no code."""

    code: str
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error_message: Optional[str] = None
    exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        return cls(code="", success=False, error_message=message, exception=exception)


def generate_code(generator: CodeGenerator, schema: Schema) -> GenerationResult:
    """
    Validate, render and format a schema with one generator.

    Rendering failures are returned as a failed result instead of raised, so
    several languages can be generated from one schema independently.
    """
    try:
        warnings = generator.validate_schema(schema)
        code = generator.generate(schema)
        formatted_code = generator.format_code(code)
    except (GeneratorError, TemplateError) as e:
        logger.error(f"{generator.language_name} generation failed: {e}")
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    root_record = schema.root_record
    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "class_count": len(schema.records),
        "root_class": root_record.name if root_record else None,
        "has_unknowns": any(
            True for record in schema.records for _ in iter_unknown_fields(record)
        ),
    }

    return GenerationResult(formatted_code, warnings, metadata)
