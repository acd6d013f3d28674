"""CLI entry point for selfqualify."""

import logging
from pathlib import Path
from typing import Any, Optional, TextIO

import click

from selfqualify import __version__
from selfqualify.commands.registry import apply_command, discover_and_register_commands
from selfqualify.core.errors import ParseError
from selfqualify.refactorings.self_qualifiers import AddSelfQualifiers, RemoveSelfQualifiers

# Dynamically discover and import all command modules
discover_and_register_commands()

_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "-c",
    "--context",
    "context_files",
    multiple=True,
    type=_PATH,
    help="File declaring classes the input may inherit from. Repeatable.",
)
@click.option("-r", "--remove", is_flag=True, help="Remove the self qualifier instead of adding it.")
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.File("r"),
    default="-",
    help="Input file. Defaults to stdin.",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file. Defaults to stdout.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log rewrite decisions to stderr.")
def main(
    context_files: tuple[Path, ...],
    remove: bool,
    input_file: TextIO,
    output_file: Optional[Path],
    verbose: bool,
) -> None:
    """Selfqualify - add or strip self qualifiers on class member references.

    Bare references inside methods to members of the enclosing class, or of its
    direct superclass, become self.member. With --remove, redundant
    self.member accesses become bare names again. Context files supply
    superclass declarations and are never modified.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    contexts = [path.read_text() for path in context_files]
    source = input_file.read()

    refactoring = RemoveSelfQualifiers(contexts) if remove else AddSelfQualifiers(contexts)
    try:
        output = refactoring.apply(source)
    except ParseError as e:
        raise click.ClickException(str(e)) from e

    if output_file is not None:
        output_file.write_text(output)
    else:
        click.echo(output, nl=False)


def refactor_file(command_name: str, file_path: Path, **params: Any) -> None:
    """Apply a rewrite command to a file.

    Args:
        command_name: Name of the command to apply ("add-self" or "remove-self")
        file_path: Path to the file to rewrite
        **params: Additional parameters for the command (context, output)

    Raises:
        ValueError: If command_name is not recognized
        ParseError: If the file or a context file is not valid Python
    """
    apply_command(command_name, file_path, **params)
