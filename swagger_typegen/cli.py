"""
Command-line interface for swagger-typegen.

Reads a Swagger 2 document from a file, URL or stdin and writes the
generated TypeScript declarations to stdout or a file.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from . import __version__
from .codegen import GeneratorConfig, TypeScriptGenerator, generate_code, load_config
from .codegen.core.config import ConfigError, get_config_manager
from .logging_config import get_logger, setup_logging
from .utils import DocumentLoaderError, load_document, parse_document

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Status output goes to stderr, generated code to stdout
console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swagger-typegen",
        description="Generate TypeScript interfaces from Swagger 2 definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  swagger-typegen petstore.yaml -o petstore.d.ts
  swagger-typegen --url https://example.com/swagger.json --camelcase
  swagger-typegen --stdin --no-wrapper --no-warning < swagger.json
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="Swagger JSON/YAML file")
    input_group.add_argument("--url", help="URL to fetch the document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the document from standard input"
    )

    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--camelcase",
        action="store_true",
        default=None,
        help="Convert type and property names to camelCase/PascalCase",
    )
    wrapper_group = gen_group.add_mutually_exclusive_group()
    wrapper_group.add_argument(
        "--wrapper",
        metavar="TEXT",
        help="Wrapper block opening, e.g. 'namespace', 'module' or "
        "'export namespace Api' (default: declare namespace OpenAPI2)",
    )
    wrapper_group.add_argument(
        "--no-wrapper", action="store_true", help="Don't wrap the declarations"
    )
    gen_group.add_argument(
        "--no-warning",
        action="store_true",
        help="Don't prepend the auto-generated banner",
    )
    gen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit descriptions as doc comments",
    )
    gen_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indentation level"
    )

    out_group = parser.add_argument_group("output options")
    out_group.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    out_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr (default: WARNING)",
    )
    out_group.add_argument("--log-file", type=Path, help="Also write logs to a file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    config_dict: dict[str, Any] = {}

    if args.camelcase:
        config_dict["camelcase"] = True

    if args.no_wrapper:
        config_dict["wrapper"] = False
    elif args.wrapper:
        config_dict["wrapper"] = args.wrapper

    if args.no_warning:
        config_dict["warning"] = False

    if args.no_comments:
        config_dict["add_comments"] = False

    if args.indent_size is not None:
        config_dict["indent_size"] = args.indent_size

    try:
        config = load_config(custom_config=config_dict, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config):
        logger.warning("Config: %s", warning)

    return config


def read_input(args: argparse.Namespace) -> Any:
    """Load the input document from the selected source."""
    try:
        if args.file:
            source, document = load_document(file_path=args.file)
        elif args.url:
            source, document = load_document(url=args.url)
        else:
            source, document = "stdin", parse_document(sys.stdin.read())
    except (DocumentLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e

    if not isinstance(document, dict):
        raise CLIError(f"Input from {source} is not a schema document")

    logger.info("Loaded document from %s", source)
    return document


def write_output(code: str, output: str | None) -> None:
    """Write generated code to a file or stdout."""
    if not output:
        sys.stdout.write(code)
        sys.stdout.flush()
        return

    output_path = Path(output)
    try:
        output_path.write_text(code, encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Failed to write to {output_path}: {e}") from e

    console.print(f"[green]✓[/green] TypeScript declarations saved to [cyan]{output_path}[/cyan]")


def _print_metadata(metadata: dict[str, Any]) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def _print_warnings(warnings: list[str]) -> None:
    console.print("\n[yellow]⚠️  Warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {warning}")
    console.print()


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    try:
        config = build_config(args)
        document = read_input(args)

        result = generate_code(TypeScriptGenerator(config), document)
        if not result.success:
            console.print(f"[red]✗ {result.error_message}[/red]")
            logger.debug("Generation failed", exc_info=result.exception)
            return 1

        write_output(result.code, args.output)

        if args.verbose and result.metadata:
            _print_metadata(result.metadata)

        if result.warnings:
            _print_warnings(result.warnings)

        return 0

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
