"""
Command-line front end of the class generator.

Loads one sample (file, URL or stdin), infers its schema once and prints or
writes the classes of every requested language.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    GenerationResult,
    RegistryError,
    SchemaError,
    generate_all,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    load_config,
    GeneratorConfig,
    ConfigError,
)
from .core.config import EXAMPLE_CONFIG
from ..logging_config import get_logger
from ..utils import JSONLoaderError, load_json, parse_json_text

logger = get_logger(__name__)

# Pygments lexer per primary language name
LEXERS = {"java": "java", "python": "python", "csharp": "csharp"}

EPILOG = """
Examples:
  json-classgen data.json --language java
  json-classgen data.json -l python -l csharp --output models/
  json-classgen --stdin -l c# --root-name Person < person.json
  json-classgen --list-languages
  json-classgen --language-info python
  json-classgen --example-config > settings.json
""".strip()


class CLIError(Exception):
    """A failure reported to the user as a one-line message."""

    pass


console = Console()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-classgen",
        description="Generate class definitions from a sample JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", nargs="?", help="JSON sample file")
    source.add_argument("--url", help="fetch the sample over HTTP(S)")
    source.add_argument("--stdin", action="store_true", help="read the sample from stdin")

    parser.add_argument(
        "--language",
        "-l",
        action="append",
        metavar="LANGUAGE",
        help="target language; repeat for several",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="output file, or a directory when several languages are given",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--root-name", default="Root", help="name of the root class (default: Root)"
    )

    inference = parser.add_argument_group("inference")
    inference.add_argument(
        "--max-depth", type=int, metavar="N", help="deepest nesting accepted"
    )
    inference.add_argument(
        "--name-collision",
        choices=["suffix", "error"],
        help="what to do when two records get the same class name",
    )
    inference.add_argument(
        "--no-clean",
        action="store_true",
        help="parse input strictly, without fixing quotes and trailing commas",
    )

    style = parser.add_argument_group("style")
    style.add_argument(
        "--indent-size", type=int, metavar="N", help="spaces per indentation level"
    )
    style.add_argument("--use-tabs", action="store_true", help="indent with tabs")

    info = parser.add_argument_group("information")
    info.add_argument(
        "--list-languages", action="store_true", help="show supported languages"
    )
    info.add_argument(
        "--language-info", metavar="LANGUAGE", help="show details of one language"
    )
    info.add_argument(
        "--example-config",
        action="store_true",
        help="print a sample --config file",
    )
    info.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        help="pick language and root name interactively",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="print generation metadata and warnings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )

    return parser


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Run the command described by parsed arguments.

    Returns:
        0 when everything requested was produced, 1 otherwise
    """
    if args.list_languages:
        return _list_languages()
    if args.language_info:
        return _show_language_info(args.language_info)
    if args.example_config:
        console.print_json(json.dumps(EXAMPLE_CONFIG))
        return 0

    try:
        if not (args.file or args.url or args.stdin):
            raise CLIError("no input given; pass a file, --url or --stdin")

        json_data = _get_input_data(args)
        config = _build_config(args)

        if args.interactive:
            from .interactive import CodegenInteractiveHandler

            handler = CodegenInteractiveHandler(
                json_data, config=config, console=console
            )
            return 0 if handler.run_interactive() else 1

        if not args.language:
            raise CLIError("--language is required for code generation")
        unknown = [name for name in args.language if not is_language_supported(name)]
        if unknown:
            raise CLIError(
                f"Unsupported language '{unknown[0]}' "
                f"(supported: {', '.join(list_supported_languages())})"
            )

        return _generate_and_output(json_data, args.language, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.debug("Command failed", exc_info=True)
        return 1


def _list_languages() -> int:
    table = Table(title="Supported languages", box=box.ROUNDED, header_style="bold")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")
    table.add_column("Generator", style="dim")

    for name, info in sorted(list_all_language_info().items()):
        table.add_row(
            name,
            info["file_extension"],
            ", ".join(info["aliases"]) or "-",
            info["class"],
        )

    console.print(table)
    console.print(
        "[dim]json-classgen FILE --language LANGUAGE | --language-info LANGUAGE[/dim]"
    )
    return 0


def _show_language_info(language: str) -> int:
    if not is_language_supported(language):
        console.print(
            f"[red]✗ Unsupported language '{escape(language)}'[/red]; "
            "see --list-languages"
        )
        return 1

    info = get_language_info(language)
    config = load_config(info["name"])

    details = Table.grid(padding=(0, 2))
    details.add_column(style="bold")
    details.add_column()
    details.add_row("Extension", info["file_extension"])
    details.add_row("Aliases", ", ".join(info["aliases"]) or "-")
    details.add_row("Generator", f"{info['module']}.{info['class']}")
    details.add_row("Indent size", str(config.indent_size))
    details.add_row("Max depth", str(config.max_depth))
    details.add_row("Name collision", config.name_collision)
    for key, value in sorted(config.settings_for(info["name"]).items()):
        details.add_row(key.replace("_", " ").capitalize(), str(value))

    console.print(Panel(details, title=info["name"], border_style="green"))
    console.print(
        f"[dim]json-classgen data.json -l {info['name']} --root-name Person[/dim]"
    )
    return 0


def _get_input_data(args: argparse.Namespace) -> Any:
    clean = not args.no_clean
    try:
        if args.stdin:
            return parse_json_text(sys.stdin.read(), clean=clean)
        if args.url:
            return load_json(url=args.url)[1]
        return load_json(file_path=args.file, clean=clean)[1]
    except (JSONLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge --config with the command-line overrides."""
    overrides: Dict[str, Any] = {
        key: value
        for key, value in (
            ("max_depth", args.max_depth),
            ("name_collision", args.name_collision),
            ("indent_size", args.indent_size),
        )
        if value is not None
    }
    if args.use_tabs:
        overrides["use_tabs"] = True

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(str(e)) from e


def _output_path(directory: Path, result: GenerationResult) -> Path:
    """File for one language's output inside an output directory."""
    stem = result.metadata["root_class"]
    if result.metadata["language"] == "python":
        stem = stem.lower()
    return directory / f"{stem}{result.metadata['file_extension']}"


def _generate_and_output(
    json_data: Any,
    languages: List[str],
    config: GeneratorConfig,
    args: argparse.Namespace,
) -> int:
    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Generating {', '.join(languages)}", total=None)
        try:
            results = generate_all(json_data, languages, config, args.root_name)
        except (SchemaError, ConfigError, RegistryError) as e:
            raise CLIError(str(e)) from e

    output = Path(args.output) if args.output else None
    to_directory = output is not None and len(languages) > 1
    if to_directory:
        output.mkdir(parents=True, exist_ok=True)

    failed = False
    for language, result in results.items():
        if not result.success:
            console.print(f"[red]✗ {language}:[/red] {escape(result.error_message)}")
            failed = True
            continue

        if output is None:
            _print_code(language, result)
        else:
            target = _output_path(output, result) if to_directory else output
            try:
                target.write_text(result.code, encoding="utf-8")
            except OSError as e:
                console.print(f"[red]✗ Cannot write {target}:[/red] {escape(str(e))}")
                failed = True
                continue
            console.print(f"[green]✓[/green] {language} -> [cyan]{target}[/cyan]")

        if args.verbose:
            _print_details(result)

    return 1 if failed else 0


def _print_code(language: str, result: GenerationResult) -> None:
    lexer = LEXERS.get(result.metadata.get("language"), "text")
    console.rule(f"{language} ({result.metadata['class_count']} classes)")
    console.print(Syntax(result.code, lexer, theme="monokai"))


def _print_details(result: GenerationResult) -> None:
    summary = Table(box=box.SIMPLE, show_header=False)
    summary.add_column(style="bold")
    summary.add_column(style="green")
    for key, value in result.metadata.items():
        summary.add_row(key.replace("_", " "), str(value))
    console.print(summary)

    if result.warnings:
        console.print("[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")
