"""
Hack Assembler - Main Interface
===============================

This module provides the Assembler class, the primary interface for
turning Hack assembly source into ``.hack`` machine code. It coordinates
source cleaning, the first pass (SymbolTableBuilder) and the second pass
(InstructionEncoder), and keeps the results of the last run for output.

Example Usage
-------------
>>> from hackasm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
...     @2
...     D=A
...     @3
...     D=D+A
...     @0
...     M=D
... ''')
>>>
>>> asm.get_code()[0]
'0000000000000010'
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm                 # writes Add.hack
    $ hackasm Add.asm -o out.hack -s Add.sym -l Add.lst
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from hackasm.assembler.encoder import InstructionEncoder
from hackasm.assembler.parser import SourceLine, clean_source, is_label
from hackasm.assembler.symbols import SymbolKind, SymbolTable, SymbolTableBuilder
from hackasm.config import AssemblerConfig
from hackasm.errors import AssemblerError, SourceLocation

logger = logging.getLogger(__name__)


class Assembler:
    """
    Two-pass Hack assembler.

    Every call to one of the ``assemble_*`` methods is an independent run:
    it builds a new symbol table and starts variable allocation at 16
    again. The code, symbols and listing of the most recent run stay
    available until the next one.

    Attributes:
        config: Active configuration
        strict_labels: If True, duplicate labels raise DuplicateSymbolError
    """

    def __init__(self, config: Optional[AssemblerConfig] = None,
                 strict_labels: Optional[bool] = None):
        """
        Initialize the assembler.

        Args:
            config: Configuration to use (default: AssemblerConfig())
            strict_labels: Overrides config.strict_labels when given
        """
        self.config = config or AssemblerConfig()
        self.strict_labels = (
            self.config.strict_labels if strict_labels is None else strict_labels
        )
        self._code: list[str] = []
        self._table: Optional[SymbolTable] = None
        self._lines: list[SourceLine] = []

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Sequence[str], filename: str = "<input>") -> list[str]:
        """
        Assemble already-cleaned instruction lines.

        Args:
            lines: Trimmed, comment-free, non-blank lines
            filename: Virtual filename for error messages

        Returns:
            One 16-character binary string per instruction
        """
        source_lines = [
            SourceLine(text=text, line=number, original=text)
            for number, text in enumerate(lines, start=1)
        ]
        return self._assemble(source_lines, filename)

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Comments (``//``), whitespace and blank lines are removed first.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            One 16-character binary string per instruction

        Raises:
            AssemblerError: If assembly fails
        """
        return self._assemble(clean_source(source), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            One 16-character binary string per instruction

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        logger.info(f"Assembling {filepath}")
        return self.assemble_string(filepath.read_text(), str(filepath))

    def _assemble(self, source_lines: list[SourceLine], filename: str) -> list[str]:
        self._code = []
        self._table = None
        self._lines = []

        texts = [line.text for line in source_lines]
        try:
            table, instructions = SymbolTableBuilder(strict=self.strict_labels).build(texts)
        except AssemblerError as e:
            raise self._locate(e, source_lines, filename)

        instruction_lines = [line for line in source_lines if not is_label(line.text)]
        try:
            code = InstructionEncoder().encode(instructions, table)
        except AssemblerError as e:
            raise self._locate(e, instruction_lines, filename)

        self._code = code
        self._table = table
        self._lines = source_lines
        return code

    @staticmethod
    def _locate(error: AssemblerError, lines: list[SourceLine],
                filename: str) -> AssemblerError:
        """Point an error from one of the passes at its source line."""
        if error.index is not None and 0 <= error.index < len(lines):
            line = lines[error.index]
            error.with_source(SourceLocation(filename, line.line), line.original)
        return error

    # =========================================================================
    # Results
    # =========================================================================

    def get_code(self) -> list[str]:
        """Return the binary words from the last run."""
        return list(self._code)

    def get_symbol_table(self) -> Optional[SymbolTable]:
        """Return the symbol table from the last run (None before any run)."""
        return self._table

    def get_symbols(self) -> dict[str, int]:
        """
        Get the symbol table as a plain dictionary.

        Returns:
            Dictionary mapping symbol names to addresses (empty before any run)
        """
        return self._table.to_dict() if self._table is not None else {}

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            Listing with ROM address, binary word and source for each line,
            followed by the labels and variables of the symbol table
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("  ROM  Word              Line  Source")
        lines.append("-" * 60)

        rom = 0
        for source in self._lines:
            if is_label(source.text):
                lines.append(f"{'':5s}  {'':16s}  {source.line:4d}  {source.original}")
                continue
            word = self._code[rom] if rom < len(self._code) else ""
            lines.append(f"{rom:5d}  {word:16s}  {source.line:4d}  {source.original}")
            rom += 1

        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for sym in self._sorted_symbols(include_predefined=False):
            lines.append(f"{sym.name:20s} = {sym.address:5d}  {sym.kind}")
        return "\n".join(lines)

    def _sorted_symbols(self, include_predefined: bool):
        if self._table is None:
            return []
        symbols = [
            sym for sym in self._table.symbols()
            if include_predefined or sym.kind is not SymbolKind.PREDEFINED
        ]
        return sorted(symbols, key=lambda sym: (sym.address, sym.name))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write machine code in ``.hack`` text format, one word per line.

        Args:
            filepath: Output file path
        """
        with open(filepath, "w") as f:
            for word in self._code:
                f.write(f"{word}\n")
        logger.info(f"Wrote {len(self._code)} words to {filepath}")

    def write_symbols(self, filepath: str | Path, include_predefined: bool = False) -> None:
        """
        Write symbol table file.

        Format: name address kind (one per line, ordered by address)

        Args:
            filepath: Output file path
            include_predefined: Also list R0-R15, SP, SCREEN, etc.
        """
        with open(filepath, "w") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for sym in self._sorted_symbols(include_predefined):
                f.write(f"{sym.name} {sym.address} {sym.kind}\n")
        logger.info(f"Wrote symbols to {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """
        Write assembly listing file.

        Args:
            filepath: Output file path
        """
        with open(filepath, "w") as f:
            f.write(self.get_listing())
            f.write("\n")
        logger.info(f"Wrote listing to {filepath}")


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>",
             strict_labels: bool = False) -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Assembly source code
        filename: Virtual filename for errors
        strict_labels: Reject duplicate labels

    Returns:
        One 16-character binary string per instruction

    Raises:
        AssemblerError: If assembly fails
    """
    asm = Assembler(strict_labels=strict_labels)
    return asm.assemble_string(source, filename)


def assemble_file(filepath: str | Path, strict_labels: bool = False) -> list[str]:
    """
    Convenience function to assemble a file.

    Args:
        filepath: Path to source file
        strict_labels: Reject duplicate labels

    Returns:
        One 16-character binary string per instruction

    Raises:
        AssemblerError: If assembly fails
    """
    asm = Assembler(strict_labels=strict_labels)
    return asm.assemble_file(filepath)
