"""
Command-line interface for schemaforge.

Reads a schema description (JSON, TypeScript interface or Mongoose model),
then prints or writes the validator, interface and model artifacts.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GeneratedCode,
    PersistenceFamily,
    RegistryError,
    Schema,
    generate_code,
    get_generator,
    list_all_target_info,
)
from .codegen.core.templates import TemplateError
from .logging_config import configure_logging, get_logger
from .parsers import EXAMPLE_TEMPLATES, ParseError, detect_format, parse_schema
from .utils import InputLoaderError, load_text, load_text_from_stream

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()

ARTIFACTS = ("validator", "interface", "model")

# Lexer used when displaying each target's output
SYNTAX_LEXERS = {
    "zod": "typescript",
    "typescript": "typescript",
    "mongoose": "typescript",
    "sql": "sql",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="schemaforge",
        description="Generate validators, interfaces and persistence models from one schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schemaforge user.json
  schemaforge user.ts --persistence relational --smart-defaults
  schemaforge --url https://example.com/user.model.ts --only model
  cat user.json | schemaforge --stdin --output-dir generated/
  schemaforge --template typescript
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Schema source file")
    input_group.add_argument("--url", help="URL to fetch the schema source from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema source from standard input"
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=["auto", "json", "typescript", "mongoose"],
        default="auto",
        help="Source format (default: auto-detect)",
    )

    gen_group = parser.add_argument_group("generation")
    gen_group.add_argument(
        "--persistence",
        "-p",
        choices=[family.value for family in PersistenceFamily],
        default=PersistenceFamily.DOCUMENT.value,
        help="Model family: document (Mongoose) or relational (SQL)",
    )
    gen_group.add_argument(
        "--smart-defaults",
        action="store_true",
        help="Add length bounds to required strings that have none",
    )
    gen_group.add_argument(
        "--only",
        choices=list(ARTIFACTS),
        help="Emit a single artifact",
    )
    gen_group.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Write artifacts to files in DIR instead of printing them",
    )
    gen_group.add_argument("--config", metavar="FILE", help="JSON configuration file")

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-targets", action="store_true", help="List generation targets and exit"
    )
    info_group.add_argument(
        "--template",
        metavar="NAME",
        help=f"Print an example input and exit ({', '.join(EXAMPLE_TEMPLATES)})",
    )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logs and metadata"
    )
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = create_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else args.log_level)

    try:
        if args.list_targets:
            return _list_targets()

        if args.template:
            return _show_template(args.template)

        source, text = _read_input(args)
        logger.info("Loaded schema source from %s", source)

        fmt = args.format
        if fmt == "auto":
            fmt = detect_format(text)
        schema = parse_schema(text, fmt)
        logger.info("Parsed %s schema %s", fmt, schema.name)

        code = generate_code(
            schema,
            persistence=args.persistence,
            smart_defaults=args.smart_defaults,
            config=args.config,
        )
        targets = _targets_for(args.persistence)

        if args.output_dir:
            _write_artifacts(schema, code, targets, args)
        else:
            _display_artifacts(schema, code, targets, args)

        _show_warnings(schema)
        if args.verbose:
            _show_metadata(schema, fmt, args)

        return 0

    except ParseError as e:
        console.print(f"[red]✗ Parse error ({e.kind}):[/red] {e.message}")
        return 1
    except (
        CLIError,
        InputLoaderError,
        ConfigError,
        RegistryError,
        TemplateError,
        FileNotFoundError,
        ValueError,
    ) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _read_input(args: argparse.Namespace) -> Tuple[str, str]:
    """Get schema text from the chosen input source."""
    if args.stdin:
        return load_text_from_stream(sys.stdin)
    if args.file or args.url:
        return load_text(file_path=args.file, url=args.url)
    raise CLIError("Input source required (file, --url, or --stdin)")


def _targets_for(persistence: str) -> Dict[str, str]:
    family = PersistenceFamily.parse(persistence)
    return {"validator": "zod", "interface": "typescript", "model": family.target}


def _selected(args: argparse.Namespace) -> Tuple[str, ...]:
    return (args.only,) if args.only else ARTIFACTS


def _artifact_filename(schema: Schema, target: str) -> str:
    return schema.name + get_generator(target).file_extension


def _write_artifacts(
    schema: Schema, code: GeneratedCode, targets: Dict[str, str], args: argparse.Namespace
) -> None:
    output_dir = Path(args.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for slot in _selected(args):
            path = output_dir / _artifact_filename(schema, targets[slot])
            path.write_text(getattr(code, slot) + "\n", encoding="utf-8")
            console.print(f"[green]✓[/green] Wrote {slot} to [cyan]{path}[/cyan]")
            logger.info("Wrote %s to %s", slot, path)
    except OSError as e:
        raise CLIError(f"Failed to write to {output_dir}: {e}") from e


def _display_artifacts(
    schema: Schema, code: GeneratedCode, targets: Dict[str, str], args: argparse.Namespace
) -> None:
    for slot in _selected(args):
        target = targets[slot]
        title = f"📄 {_artifact_filename(schema, target)}"
        syntax = Syntax(getattr(code, slot), SYNTAX_LEXERS[target], theme="monokai")
        console.print(Panel(syntax, title=title, border_style="green", expand=False))


def _show_warnings(schema: Schema) -> None:
    warnings = get_generator("zod").validate_schema(schema)
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")


def _show_metadata(schema: Schema, fmt: str, args: argparse.Namespace) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    metadata_table.add_row("Schema", schema.name)
    metadata_table.add_row("Source Format", fmt)
    metadata_table.add_row("Field Count", str(len(schema.fields)))
    metadata_table.add_row("Max Depth", str(schema.get_max_depth()))
    metadata_table.add_row("Persistence", args.persistence)
    metadata_table.add_row("Smart Defaults", str(args.smart_defaults))

    console.print()
    console.print(metadata_table)


def _list_targets() -> int:
    """List generation targets with details."""
    table = Table(title="📋 Generation Targets", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(list_all_target_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    return 0


def _show_template(name: str) -> int:
    """Print one of the bundled example inputs."""
    template = EXAMPLE_TEMPLATES.get(name)
    if template is None:
        raise CLIError(
            f"Unknown template '{name}'. Available: {', '.join(EXAMPLE_TEMPLATES)}"
        )

    lexer = "json" if template["format"] == "json" else "typescript"
    console.print(
        Panel(
            Syntax(template["content"], lexer, theme="monokai"),
            title=f"💡 {template['title']}",
            border_style="blue",
            expand=False,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
