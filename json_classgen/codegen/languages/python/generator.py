"""
Python code generator implementation.

Generates plain classes with annotated attributes and an ``__init__``
taking every field.
"""

from typing import Dict, List, Any, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.schema import Field, Schema
from .config import PYTHON_IMPORTS, PythonTypeMapper, create_python_type_mapper
from .naming import PYTHON_INIT_NAMES, PYTHON_RESERVED_WORDS


class PythonGenerator(CodeGenerator):
    """Code generator for annotated Python classes."""

    # PEP 8: two blank lines between top-level classes
    class_separator = "\n\n\n"

    reserved_words = PYTHON_RESERVED_WORDS

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def create_type_mapper(self) -> PythonTypeMapper:
        return create_python_type_mapper(self.language_config)

    def get_import_statements(self, schema: Schema) -> List[str]:
        """Return the fixed import header."""
        return list(PYTHON_IMPORTS)

    def build_field_data(self, field: Field) -> Dict[str, Any]:
        """Build template data for one attribute and its __init__ parameter."""
        python_type = self.type_mapper.map_type(field.type)
        return {
            "name": field.key,
            "type": python_type,
            "param": f"{field.key}: {python_type}",
        }

    def validate_schema(self, schema: Schema) -> List[str]:
        """Validate schemas for Python generation."""
        warnings = super().validate_schema(schema)

        for record in schema.records:
            for item in record.fields:
                if item.key in PYTHON_INIT_NAMES:
                    warnings.append(
                        f"Field {record.name}.{item.key} clashes with the "
                        f"'{item.key}' parameter of __init__"
                    )

        return warnings


def create_python_generator(
    config: Optional[GeneratorConfig] = None,
) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    if config is None:
        from ...core.config import load_config

        config = load_config("python")

    return PythonGenerator(config)
