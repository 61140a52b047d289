"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly:
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Symbol table and listing:
    $ hackasm Max.asm -s Max.sym -l Max.lst

Print words instead of writing a file:
    $ hackasm Max.asm --stdout

Verbose mode:
    $ hackasm -v Max.asm
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from hackasm import __version__
from hackasm.assembler import Assembler, SymbolKind
from hackasm.cli.errors import ExitCode, handle_cli_exception
from hackasm.config import AssemblerConfig


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input with .hack suffix)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Write machine code to standard output instead of a file",
)
@click.option(
    "--strict-labels/--no-strict-labels",
    default=None,
    help="Reject labels declared more than once. "
         "Default: off, or HACKASM_STRICT_LABELS.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    listing: Optional[Path],
    to_stdout: bool,
    strict_labels: Optional[bool],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into Hack machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm Max.asm --stdout     # Print the words
    """
    if output is not None and to_stdout:
        click.echo("Error: -o/--output and --stdout are mutually exclusive", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )

    try:
        config = AssemblerConfig.from_env()
        asm = Assembler(config=config, strict_labels=strict_labels)

        if verbose:
            click.echo(f"Assembling {input_file}...", err=True)
            if asm.strict_labels:
                click.echo("Strict label checking: enabled", err=True)

        code = asm.assemble_file(input_file)

        if to_stdout:
            for word in code:
                click.echo(word)
        else:
            output_file = output or input_file.with_suffix(config.output_suffix)
            asm.write_hack(output_file)
            if verbose:
                click.echo(f"Wrote {len(code)} words to {output_file}", err=True)

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}", err=True)

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}", err=True)

        if verbose:
            table = asm.get_symbol_table()
            labels = len(table.symbols(SymbolKind.LABEL))
            variables = len(table.symbols(SymbolKind.VARIABLE))
            click.echo(
                f"Assembly complete: {len(code)} instructions, "
                f"{labels} labels, {variables} variables",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
