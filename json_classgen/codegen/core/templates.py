"""
Jinja2 rendering for generated classes.

Each language keeps ``class.<ext>.j2`` and ``module.<ext>.j2`` in its own
``templates/`` directory; templates can also be registered in memory.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
)

from .naming import capitalize


class TemplateError(Exception):
    """Raised when a template is missing or fails to render."""

    pass


class TemplateEngine:
    """Jinja2 environment configured for whitespace-exact code output."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir
        self._memory = DictLoader({})

        loader: BaseLoader = self._memory
        if template_dir is not None and template_dir.is_dir():
            loader = ChoiceLoader([self._memory, FileSystemLoader(str(template_dir))])

        # Block tags own their line, so templates read like the code they emit
        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["upper_first"] = capitalize

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or rendering fails
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"Invalid template {template_name}: {e}") from e

        try:
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    def add_template(self, name: str, content: str):
        """Register an in-memory template; it shadows a file of the same name."""
        self._memory.mapping[name] = content


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    return TemplateEngine(template_dir)
