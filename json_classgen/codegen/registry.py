"""
Registry of target languages.

Maps language names and aliases to generator classes and builds configured
generator instances for them.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, ConfigError, load_config

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Raised for unknown languages and invalid registrations."""

    pass


class GeneratorRegistry:
    """Language name -> generator class table with alias support."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Add a generator under a primary name and optional aliases.

        An existing registration is kept unless ``replace`` is set.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                is already bound elsewhere
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError(
                f"{generator_class!r} is not a CodeGenerator subclass"
            )

        primary = language.lower()
        if primary in self._generators and not replace:
            return
        self._generators[primary] = generator_class

        for alias in (name.lower() for name in aliases or []):
            if alias == primary:
                continue
            if not replace:
                self._check_alias(alias, primary)
            self._aliases[alias] = primary

    def _check_alias(self, alias: str, primary: str):
        if alias in self._generators:
            raise RegistryError(
                f"Alias '{alias}' conflicts with existing primary language"
            )
        bound = self._aliases.get(alias)
        if bound is not None and bound != primary:
            raise RegistryError(f"Alias '{alias}' already points to '{bound}'")

    def unregister(self, language: str):
        """Drop a language together with every alias pointing at it."""
        primary = language.lower()
        self._generators.pop(primary, None)
        self._aliases = {
            alias: target for alias, target in self._aliases.items() if target != primary
        }

    def resolve(self, language: str) -> str:
        """
        Turn a language name or alias into the primary name.

        Raises:
            RegistryError: If nothing is registered under ``language``
        """
        key = language.lower()
        if key in self._generators:
            return key
        try:
            return self._aliases[key]
        except KeyError:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            ) from None

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._generators[self.resolve(language)]

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Instantiate the generator of a language.

        Dict and file configs are merged over that language's defaults; a
        GeneratorConfig is used as given.

        Raises:
            RegistryError: For unknown languages or unusable configuration
        """
        primary = self.resolve(language)
        generator_class = self._generators[primary]

        if config is not None and not isinstance(
            config, (GeneratorConfig, dict, str, Path)
        ):
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            if isinstance(config, GeneratorConfig):
                settings = config
            elif isinstance(config, dict):
                settings = load_config(primary, custom_config=config)
            else:
                settings = load_config(primary, config_file=config)
            return generator_class(settings)
        except (ConfigError, ValueError, TypeError) as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Sorted primary language names."""
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        primary = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == primary
        )

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._generators or key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        Returns:
            Dict with name, class, file_extension, aliases and module
        """
        primary = self.resolve(language)
        generator_class = self._generators[primary]
        sample = generator_class(load_config(primary))

        return {
            "name": sample.language_name,
            "class": generator_class.__name__,
            "file_extension": sample.file_extension,
            "aliases": self.get_aliases_for_language(primary),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Shared registry with the built-in languages, created on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.java import JavaGenerator
    from .languages.python import PythonGenerator
    from .languages.csharp import CSharpGenerator

    registry.register("java", JavaGenerator)
    registry.register("python", PythonGenerator, aliases=["py"])
    registry.register("csharp", CSharpGenerator, aliases=["c#", "cs"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Add a generator to the shared registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Configured generator for ``language`` from the shared registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Info dicts of every registered language, keyed by primary name."""
    return {name: get_language_info(name) for name in list_supported_languages()}
