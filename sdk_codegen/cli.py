"""
Command-line interface for SDK code generation.

Usage:
  sdk-codegen generate model.json -o out/
  sdk-codegen generate --url https://example.com/model.json --dry-run
  sdk-codegen languages
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .codegen import GenerationResult, generate_from_model, load_config
from .codegen.core.config import ConfigError, GeneratorConfig
from .codegen.core.model import ModelError
from .codegen.registry import RegistryError, list_all_language_info
from .logging_config import configure_logging, get_logger
from .utils import ModelLoadError, load_model

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="sdk-codegen",
        description="Generate typed client SDK sources from an API data model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sdk-codegen generate model.json -o include/
  sdk-codegen generate model.json --namespace contoso.api --dry-run
  sdk-codegen languages
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        help="Generate SDK sources from a model description",
        description="Generate one source file per derived entity",
    )
    input_group = generate.add_mutually_exclusive_group(required=True)
    input_group.add_argument("model", nargs="?", help="JSON model description file")
    input_group.add_argument("--url", help="URL to fetch the model description from")

    generate.add_argument("--output", "-o", metavar="DIR", help="Output directory")
    generate.add_argument("--config", metavar="FILE", help="JSON configuration file")
    generate.add_argument(
        "--language", "-l", default="cpp", help="Target language (default: cpp)"
    )
    generate.add_argument("--namespace", help="Namespace of the generated code")
    generate.add_argument("--service-url", help="Default service URL of the client")
    generate.add_argument(
        "--no-comments", action="store_true", help="Omit the file banner comment"
    )
    generate.add_argument(
        "--dry-run", action="store_true", help="List the files instead of writing them"
    )
    generate.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    generate.set_defaults(func=_handle_generate)

    languages = subparsers.add_parser("languages", help="List supported target languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from a config file and CLI overrides."""
    overrides: Dict[str, Any] = {}

    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.service_url:
        overrides["service_url"] = args.service_url
    if args.output:
        overrides["output_dir"] = args.output
    if args.no_comments:
        overrides["add_comments"] = False

    return load_config(custom_config=overrides, config_file=args.config)


def write_files(files: Dict[str, str], output_dir: Path) -> List[Path]:
    """Write generated files below ``output_dir``."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for file_name, content in files.items():
            path = output_dir / file_name
            path.write_text(content, encoding="utf-8")
            written.append(path)
        return written
    except OSError as e:
        raise CLIError(f"Failed to write to {output_dir}: {e}") from e


def _print_summary(result: GenerationResult, verbose: bool) -> None:
    table = Table(
        title="Generation Summary",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(table)

    if verbose:
        files_table = Table(title="Files", box=box.SIMPLE, header_style="bold cyan")
        files_table.add_column("File", style="cyan")
        files_table.add_column("Lines", justify="right")
        for file_name, content in result.files.items():
            files_table.add_row(file_name, str(content.count("\n")))
        console.print(files_table)


def _print_warnings(warnings: List[str]) -> None:
    if not warnings:
        return
    console.print("\n[yellow]Warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {warning}")
    console.print()


def _handle_generate(args: argparse.Namespace) -> int:
    config = build_config(args)
    source, model = load_model(file_path=args.model, url=args.url)
    console.print(f"Loaded: [cyan]{source}[/cyan]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"[green]Generating {args.language} code...", total=None)
        result = generate_from_model(model, args.language, config)
        progress.remove_task(task)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    _print_warnings(result.warnings)

    if args.dry_run:
        for file_name in result.files:
            console.print(f"  {file_name}", highlight=False)
    else:
        output_dir = Path(config.output_dir or ".")
        written = write_files(result.files, output_dir)
        console.print(
            f"[green]✓[/green] Wrote {len(written)} files to [cyan]{output_dir}[/cyan]"
        )

    _print_summary(result, args.verbose)
    return 0


def _handle_languages(args: argparse.Namespace) -> int:
    language_info = list_all_language_info()

    table = Table(title="Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(name, info["file_extension"], info["class"], aliases)

    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] sdk-codegen generate [dim]model.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan] -o [dim]DIR[/dim]",
            title="Quick Start",
            border_style="blue",
        )
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    verbose = getattr(args, "verbose", False)
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        return args.func(args)
    except (
        CLIError,
        ConfigError,
        ModelLoadError,
        ModelError,
        RegistryError,
        FileNotFoundError,
    ) as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
