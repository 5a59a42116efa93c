"""
C# code generator implementation.

Generates C# classes with auto-implemented properties.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import capitalize
from ...core.schema import Field, Schema
from .config import CSHARP_USINGS, CSharpTypeMapper, create_csharp_type_mapper


class CSharpGenerator(CodeGenerator):
    """Code generator for C# classes with ``{ get; set; }`` properties."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def get_template_directory(self) -> Path:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def create_type_mapper(self) -> CSharpTypeMapper:
        return create_csharp_type_mapper(self.language_config)

    def get_import_statements(self, schema: Schema) -> List[str]:
        """Return the fixed using directives."""
        return list(CSHARP_USINGS)

    def member_name(self, key: str) -> str:
        """Properties use the capitalized key."""
        return capitalize(key)

    def build_field_data(self, field: Field) -> Dict[str, Any]:
        """Build template data for one auto-property."""
        return {
            "name": self.member_name(field.key),
            "type": self.type_mapper.map_type(field.type),
        }

    def validate_schema(self, schema: Schema) -> List[str]:
        """Validate schemas for C# generation."""
        warnings = super().validate_schema(schema)

        # CS0542: member names cannot be the same as their enclosing type
        for record in schema.records:
            for item in record.fields:
                if self.member_name(item.key) == record.name:
                    warnings.append(
                        f"Property {record.name}.{self.member_name(item.key)} has "
                        f"the same name as its enclosing class"
                    )

        return warnings


def create_csharp_generator(
    config: Optional[GeneratorConfig] = None,
) -> CSharpGenerator:
    """Create a C# generator with default configuration."""
    if config is None:
        from ...core.config import load_config

        config = load_config("csharp")

    return CSharpGenerator(config)
