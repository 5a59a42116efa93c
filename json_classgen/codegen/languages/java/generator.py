"""
Java code generator implementation.

Generates plain Java classes with private fields and getter/setter pairs.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.schema import Field, Schema
from .config import JAVA_IMPORTS, JavaTypeMapper, create_java_type_mapper
from .naming import JAVA_RESERVED_WORDS


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes with getters and setters."""

    reserved_words = JAVA_RESERVED_WORDS

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def create_type_mapper(self) -> JavaTypeMapper:
        return create_java_type_mapper(self.language_config)

    def get_import_statements(self, schema: Schema) -> List[str]:
        """Return the fixed Java import block."""
        return list(JAVA_IMPORTS)

    def build_field_data(self, field: Field) -> Dict[str, Any]:
        """Build template data for one field and its accessors."""
        return {
            "name": field.key,
            "type": self.type_mapper.map_type(field.type),
        }


def create_java_generator(config: Optional[GeneratorConfig] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    if config is None:
        from ...core.config import load_config

        config = load_config("java")

    return JavaGenerator(config)
