import json

import pytest

from json_classgen.codegen.core.config import (
    EXAMPLE_CONFIG,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestGeneratorConfig:
    """Test configuration defaults"""

    def test_defaults(self):
        config = GeneratorConfig()

        assert config.indent == "    "
        assert config.max_depth == 100
        assert config.name_collision == "suffix"
        assert config.languages == {}

    def test_indent_variants(self):
        assert GeneratorConfig(indent_size=2).indent == "  "
        assert GeneratorConfig(use_tabs=True).indent == "\t"

    def test_settings_for_language(self):
        config = GeneratorConfig(languages={"java": {"number_type": "BigDecimal"}})

        assert config.settings_for("java") == {
            "number_type": "BigDecimal",
            "unknown_type": "Object",
        }
        assert config.settings_for("Python") == {
            "number_type": "float",
            "unknown_type": "Any",
        }
        assert config.settings_for("cobol") == {}


class TestConfigManager:
    """Test configuration loading and merging"""

    def test_language_defaults(self):
        assert load_config("java").settings_for("java") == {
            "number_type": "double",
            "unknown_type": "Object",
        }
        assert load_config().settings_for("csharp")["unknown_type"] == "object"

    def test_bare_settings_scoped_to_language(self):
        config = load_config("java", {"indent_size": 2, "unknown_type": "JsonNode"})

        assert config.indent_size == 2
        assert config.languages == {"java": {"unknown_type": "JsonNode"}}
        assert config.settings_for("csharp")["unknown_type"] == "object"

    def test_bare_settings_need_a_language(self):
        with pytest.raises(ConfigError, match="section"):
            load_config(custom_config={"number_type": "BigDecimal"})

    def test_language_sections(self):
        config = load_config(
            custom_config={
                "java": {"number_type": "BigDecimal"},
                "languages": {"python": {"number_type": "Decimal"}},
            }
        )

        assert config.settings_for("java")["number_type"] == "BigDecimal"
        assert config.settings_for("python")["number_type"] == "Decimal"
        assert config.settings_for("csharp")["number_type"] == "double"

    def test_nested_language_config_merges(self):
        config = load_config("python", {"language_config": {"number_type": "Decimal"}})

        assert config.settings_for("python") == {
            "number_type": "Decimal",
            "unknown_type": "Any",
        }

    def test_section_must_be_object(self):
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(custom_config={"java": "BigDecimal"})

    def test_defaults_are_not_mutated(self):
        load_config("java", {"number_type": "BigDecimal"})

        assert load_config("java").settings_for("java")["number_type"] == "double"

    def test_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(EXAMPLE_CONFIG), encoding="utf-8")

        config = load_config(config_file=path)

        assert config.indent_size == 2
        assert config.max_depth == 32
        assert config.name_collision == "error"
        assert config.settings_for("java")["number_type"] == "BigDecimal"
        assert config.settings_for("python")["number_type"] == "float"
        assert "class.py.j2" in config.settings_for("python")["templates"]

    def test_custom_config_wins_over_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"indent_size": 8, "java": {"number_type": "float"}}),
            encoding="utf-8",
        )

        config = load_config(
            config_file=path,
            custom_config={"indent_size": 3, "java": {"unknown_type": "JsonNode"}},
        )

        assert config.indent_size == 3
        assert config.settings_for("java") == {
            "number_type": "float",
            "unknown_type": "JsonNode",
        }

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "absent.json")

    def test_non_json_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("indent_size: 2", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{indent_size", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_non_object_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)

    @pytest.mark.parametrize(
        "settings",
        [
            {"max_depth": "10"},
            {"max_depth": 0},
            {"max_depth": True},
            {"indent_size": -1},
            {"use_tabs": "yes"},
            {"name_collision": "skip"},
            {"java": {"number_type": ""}},
            {"java": {"templates": ["class.java.j2"]}},
        ],
    )
    def test_invalid_values_rejected(self, settings):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(custom_config=settings)

    def test_invalid_file_value_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"max_depth": "10"}), encoding="utf-8")

        with pytest.raises(ConfigError, match="max_depth"):
            load_config(config_file=path)

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        path = tmp_path / "saved.json"
        saved = manager.get_config(
            "csharp", {"indent_size": 2, "number_type": "decimal"}
        )

        manager.save_config(saved, path)

        assert manager.get_config(config_file=path) == saved

    def test_list_languages(self):
        assert sorted(ConfigManager().list_languages()) == ["csharp", "java", "python"]

    def test_validate_config(self):
        manager = ConfigManager()

        assert manager.validate_config(GeneratorConfig()) == []
        warnings = manager.validate_config(
            GeneratorConfig(max_depth=0, name_collision="skip", indent_size=-1)
        )
        assert len(warnings) == 3
