"""
Interactive class generation: choose a target and root name, then preview
or save the result.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.prompt import Prompt, Confirm
from rich.panel import Panel
from rich.table import Table
from rich.syntax import Syntax
from rich import box
from rich.markup import escape

from . import (
    GenerationResult,
    GeneratorConfig,
    Schema,
    SchemaError,
    generate_from_schema,
    infer,
    list_all_language_info,
    list_supported_languages,
)

MENU = {"1": "generate", "2": "languages", "b": "back"}


class CodegenInteractiveHandler:
    """Prompt-driven front end over a single loaded sample."""

    def __init__(
        self,
        data: Any,
        config: Optional[GeneratorConfig] = None,
        console: Console = None,
    ):
        self.data = data
        self.config = config
        self.console = console or Console()
        # Inference depends only on the root name
        self._schemas: Dict[str, Schema] = {}

    def run_interactive(self) -> bool:
        """
        Loop over the menu until the user leaves.

        Returns:
            True when left through the menu, False on Ctrl-C
        """
        try:
            while True:
                action = self._ask_action()
                if action == "back":
                    return True
                if action == "generate":
                    self._interactive_generation()
                else:
                    self._show_detailed_language_info()
        except KeyboardInterrupt:
            self.console.print("\n[yellow]👋 Code generation cancelled[/yellow]")
            return False

    def _ask_action(self) -> str:
        self.console.print()
        self.console.print(
            Panel.fit(
                "[cyan]1.[/cyan] 🚀 Generate classes\n"
                "[cyan]2.[/cyan] 📋 Show languages\n"
                "[cyan]b.[/cyan] 🔙 Exit",
                title="⚡ Class Generator",
                border_style="blue",
            )
        )
        choice = Prompt.ask("Choose an option", choices=list(MENU), default="1")
        return MENU[choice]

    def _interactive_generation(self):
        language = self._select_language()
        if language is None:
            return

        root_name = Prompt.ask("Root class name", default="Root")
        result = self._generate_code(language, root_name)
        if result is not None:
            self._handle_generation_output(result, language)

    def _select_language(self) -> Optional[str]:
        languages = list_supported_languages()
        listing = "\n".join(
            f"  [cyan]{number}.[/cyan] {name}"
            for number, name in enumerate(languages, 1)
        )
        self.console.print(f"\n[bold]Target language[/bold]\n{listing}\n  [cyan]b.[/cyan] Back")

        numbers = [str(number) for number in range(1, len(languages) + 1)]
        choice = Prompt.ask("Select language", choices=numbers + ["b"], default="1")
        return None if choice == "b" else languages[int(choice) - 1]

    def _show_detailed_language_info(self):
        table = Table(box=box.SIMPLE_HEAD, header_style="bold cyan")
        for column in ("Language", "Extension", "Aliases"):
            table.add_column(column)

        for name, info in sorted(list_all_language_info().items()):
            table.add_row(
                name, info["file_extension"], ", ".join(info["aliases"]) or "-"
            )

        self.console.print(table)

    def _get_schema(self, root_name: str) -> Schema:
        if root_name not in self._schemas:
            self._schemas[root_name] = infer(self.data, root_name, self.config)
        return self._schemas[root_name]

    def _generate_code(
        self, language: str, root_name: str
    ) -> Optional[GenerationResult]:
        """Run inference and generation, reporting failures on the console."""
        try:
            schema = self._get_schema(root_name)
        except SchemaError as e:
            self.console.print(f"[red]❌ Inference failed:[/red] {e}")
            return None

        result = generate_from_schema(schema, language, self.config)
        if not result.success:
            self.console.print(f"[red]❌ Generation failed:[/red] {result.error_message}")
            return None
        return result

    def _handle_generation_output(self, result: GenerationResult, language: str):
        self._display_warnings(result.warnings)

        action = Prompt.ask(
            "Preview or save?", choices=["preview", "save", "both"], default="preview"
        )
        if action != "save":
            self.console.print(
                Syntax(result.code, language, theme="monokai", padding=1)
            )
        if action != "preview" or Confirm.ask("Save to a file?", default=True):
            self._save_code(result)

    def _save_code(self, result: GenerationResult):
        meta = result.metadata
        stem = meta["root_class"]
        if meta["language"] == "python":
            stem = stem.lower()

        path = Path(Prompt.ask("Save as", default=f"{stem}{meta['file_extension']}"))
        if path.suffix != meta["file_extension"]:
            path = path.with_name(path.name + meta["file_extension"])

        if path.exists() and not Confirm.ask(f"Overwrite {path}?", default=False):
            return

        try:
            path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            self.console.print(f"[red]❌ Could not write {path}:[/red] {e}")
            return
        self.console.print(f"[green]✅ Saved[/green] [cyan]{path}[/cyan]")

    def _display_warnings(self, warnings: List[str]):
        for warning in warnings:
            self.console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")
