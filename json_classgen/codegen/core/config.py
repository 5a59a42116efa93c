"""
Generator settings: per-language defaults, JSON config files and
overrides merged into one GeneratorConfig.

Layout, indentation and inference settings are shared by every target.
Type spellings and template overrides live in per-language sections::

    {"indent_size": 2, "java": {"number_type": "BigDecimal"}}
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised for unreadable or malformed configuration."""

    pass


# Type spellings each generator starts from
LANGUAGE_DEFAULTS = {
    "java": {"number_type": "double", "unknown_type": "Object"},
    "python": {"number_type": "float", "unknown_type": "Any"},
    "csharp": {"number_type": "double", "unknown_type": "object"},
}


@dataclass
class GeneratorConfig:
    """Settings shared by inference and every generator."""

    # Output layout
    indent_size: int = 4
    use_tabs: bool = False

    # Inference settings
    max_depth: int = 100
    name_collision: str = "suffix"  # suffix, error

    # Per-language sections keyed by primary language name
    languages: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size

    def settings_for(self, language: str) -> Dict[str, Any]:
        """Defaults of one language overlaid with its configured section."""
        key = language.lower()
        return {**LANGUAGE_DEFAULTS.get(key, {}), **self.languages.get(key, {})}


class ConfigManager:
    """Builds GeneratorConfig objects from defaults, files and overrides."""

    def __init__(self):
        self._configs: Dict[str, Dict[str, Any]] = {
            language: dict(settings) for language, settings in LANGUAGE_DEFAULTS.items()
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge the config file, then ``custom_config``, over the defaults.

        With ``language`` given, top-level keys that are not shared settings
        belong to that language's section, so ``{"number_type": "Decimal"}``
        is shorthand for ``{"python": {"number_type": "Decimal"}}``. Without
        it such keys are rejected.

        Raises:
            ConfigError: If a source is unreadable or a setting is invalid
        """
        scope = language.lower() if language else None
        merged: Dict[str, Any] = {"languages": {}}

        if config_file:
            self._merge(merged, self._load_config_file(config_file), scope)

        if custom_config:
            self._merge(merged, custom_config, scope)

        config = self._dict_to_config(merged)
        problems = self.validate_config(config)
        if problems:
            raise ConfigError(f"Invalid configuration: {'; '.join(problems)}")
        return config

    def _merge(
        self, base: Dict[str, Any], overrides: Dict[str, Any], scope: Optional[str]
    ) -> None:
        """Merge overrides into base; language sections merge key by key."""
        shared = {item.name for item in fields(GeneratorConfig)} - {"languages"}
        sections = base["languages"]

        for key, value in overrides.items():
            if key in shared:
                base[key] = value
            elif key == "languages" and isinstance(value, dict):
                for language, section in value.items():
                    self._merge_section(sections, language, section)
            elif key in self._configs:
                self._merge_section(sections, key, value)
            elif scope is not None:
                # "language_config" is the older spelling of the scoped section
                section = value if key == "language_config" else {key: value}
                self._merge_section(sections, scope, section)
            else:
                raise ConfigError(
                    f"Unknown setting '{key}'; language settings belong in a "
                    f'section such as {{"java": {{"{key}": ...}}}}'
                )

    def _merge_section(
        self, sections: Dict[str, Dict[str, Any]], language: str, section: Any
    ) -> None:
        if not isinstance(section, dict):
            raise ConfigError(f"Section '{language}' must be a JSON object")
        sections.setdefault(language.lower(), {}).update(section)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read a JSON object from a .json file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug(f"Loaded configuration file {path}")
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        names = {item.name for item in fields(GeneratorConfig)}
        return GeneratorConfig(**{k: v for k, v in config_dict.items() if k in names})

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write ``config`` as JSON, readable again through ``config_file``."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Languages that have default settings."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """Return a message for every out-of-range setting."""
        warnings = []

        if config.name_collision not in {"suffix", "error"}:
            warnings.append(f"Invalid name_collision: {config.name_collision!r}")

        if not _is_int(config.max_depth) or config.max_depth < 1:
            warnings.append(f"Invalid max_depth: {config.max_depth!r}")

        if not _is_int(config.indent_size) or config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size!r}")

        if not isinstance(config.use_tabs, bool):
            warnings.append(f"Invalid use_tabs: {config.use_tabs!r}")

        for language, section in config.languages.items():
            if not isinstance(section, dict):
                warnings.append(f"Invalid {language} section: {section!r}")
                continue
            for key in ("number_type", "unknown_type"):
                value = section.get(key, "x")
                if not isinstance(value, str) or not value.strip():
                    warnings.append(f"Invalid {language}.{key}: {value!r}")

            templates = section.get("templates", {})
            if not isinstance(templates, dict) or not all(
                isinstance(name, str) and isinstance(source, str)
                for name, source in templates.items()
            ):
                warnings.append(
                    f"Invalid {language}.templates: expected template name "
                    "to source text"
                )

        return warnings


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Shared manager, created on first use."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Load a configuration through the shared ConfigManager."""
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Contents of a typical --config file, printed by --example-config
EXAMPLE_CONFIG = {
    "indent_size": 2,
    "max_depth": 32,
    "name_collision": "error",
    "java": {"number_type": "BigDecimal"},
    "csharp": {"number_type": "decimal", "unknown_type": "JsonElement"},
    "python": {
        "templates": {
            "class.py.j2": "class {{ class_name }}:\n{% for f in fields %}\n"
            "{{ indent }}{{ f.name }}: {{ f.type }}\n{% else %}\n"
            "{{ indent }}pass\n{% endfor %}\n"
        }
    },
}
