"""
hackasm - Two-Pass Assembler for the Hack Computer
==================================================

This package translates Hack assembly language into Hack machine code:
one 16-character binary string per instruction, the ``.hack`` format
loaded by the Hack CPU emulator.

Main Components
---------------
- **assembler**: Source cleaning, symbol table, both passes and output
  writers (``.hack``, symbol file, listing)
- **config**: Assembler settings, optionally read from the environment
- **errors**: Exception hierarchy rooted at HackError
- **cli**: The ``hackasm`` command-line tool

Quick Start
-----------
Assemble a program:
    >>> from hackasm import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tool:
    $ hackasm Max.asm -o Max.hack

Reference Documentation
-----------------------
- Hack machine language: https://www.nand2tetris.org/project06
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hackasm.assembler import Assembler, assemble, assemble_file
from hackasm.config import AssemblerConfig
from hackasm.errors import (
    HackError,
    AssemblerError,
    UnknownMnemonicError,
    DuplicateSymbolError,
    AddressRangeError,
    ConfigError,
    SourceLocation,
)

__all__ = [
    "__version__",
    "Assembler",
    "assemble",
    "assemble_file",
    "AssemblerConfig",
    "HackError",
    "AssemblerError",
    "UnknownMnemonicError",
    "DuplicateSymbolError",
    "AddressRangeError",
    "ConfigError",
    "SourceLocation",
]
