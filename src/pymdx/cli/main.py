"""Main CLI entry point."""

import logging
from typing import IO, Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from pymdx import __version__
from pymdx.compiler import serialize
from pymdx.compiler.ast_nodes import Program
from pymdx.compiler.exceptions import PyMdxError
from pymdx.compiler.options import OUTPUT_FORMATS, PROGRAM, RewriteOptions
from pymdx.compiler.rewrite import JsxRewriter
from pymdx.compiler.scope import top_scope_declarations

console = Console(stderr=True)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'pymdx --help' for more information."

# Cyan theme
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "pymdx": [
        {
            "name": "Commands",
            "commands": ["rewrite", "scope"],
        }
    ]
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_program(source: IO[str]) -> Program:
    """Read an ESTree program from JSON."""
    try:
        tree = serialize.load(source)
    except ValueError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="INPUT")
    except PyMdxError as e:
        raise click.ClickException(str(e))

    if not isinstance(tree, Program):
        raise click.BadParameter(
            f"Expected a Program node, got {tree.type}", param_hint="INPUT"
        )
    return tree


@click.group(
    help=f"""
[bold white on cyan] pymdx [/] [bold cyan]v{__version__}[/] Route MDX JSX through injected components.

Run [bold cyan]pymdx rewrite tree.json[/] to rewrite an ESTree program.

[dim]Input and output are ESTree JSON, as produced by acorn with acorn-jsx.[/dim]
"""
)
@click.version_option(__version__)
def cli() -> None:
    pass


@cli.command()
@click.argument("input", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Where to write the rewritten tree (default: stdout).",
)
@click.option(
    "--output-format",
    type=click.Choice(OUTPUT_FORMATS),
    default=PROGRAM,
    show_default=True,
    help="How the provider is bound: import declaration or arguments[0].",
)
@click.option(
    "--provider-import-source",
    default=None,
    help="Module to import useMDXComponents from.",
)
@click.option("--indent", default=None, type=int, help="Indent JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Log what the pass does.")
def rewrite(
    input: IO[str],
    output: IO[str],
    output_format: str,
    provider_import_source: Optional[str],
    indent: Optional[int],
    verbose: bool,
) -> None:
    """Rewrite JSX in an ESTree program to use injected components."""
    _configure_logging(verbose)

    try:
        options = RewriteOptions(
            output_format=output_format,
            provider_import_source=provider_import_source,
        )
    except PyMdxError as e:
        raise click.BadParameter(str(e), param_hint="--provider-import-source")

    tree = _read_program(input)

    try:
        JsxRewriter(options).rewrite(tree)
    except PyMdxError as e:
        raise click.ClickException(str(e))

    serialize.dump(tree, output, indent=indent)
    output.write("\n")

    if verbose:
        console.print(f"✅ Rewrote [cyan]{input.name}[/]")


@cli.command()
@click.argument("input", type=click.File("r", encoding="utf-8"))
def scope(input: IO[str]) -> None:
    """List the names declared at the top level of an ESTree program."""
    tree = _read_program(input)
    for name in sorted(top_scope_declarations(tree)):
        click.echo(name)


def main() -> None:
    cli(prog_name="pymdx")


if __name__ == "__main__":
    main()
