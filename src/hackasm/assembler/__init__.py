"""
Hack Assembler
==============

This package provides a two-pass assembler for the Hack computer, the
16-bit machine from "The Elements of Computing Systems".

Main Components
---------------
- **Assembler**: Main assembler class that orchestrates the assembly process
- **SymbolTableBuilder**: First pass, binds labels and strips label lines
- **InstructionEncoder**: Second pass, allocates variables and encodes words
- **SymbolTable**: Name to address mapping with the predefined symbols

Assembly Process
----------------
1. **Cleaning**: strip ``//`` comments, whitespace and blank lines
2. **Pass 1 (SymbolTableBuilder)**: bind each ``(LABEL)`` to the ROM
   address of the instruction after it and remove the label lines
3. **Pass 2 (InstructionEncoder)**: resolve ``@symbol`` operands,
   allocating variables from RAM 16 upward, and encode each instruction
   as a 16-character binary string

Example Usage
-------------
>>> from hackasm.assembler import assemble
>>> assemble('''
...     @i
...     M=1
... (LOOP)
...     @LOOP
...     0;JMP
... ''')
['0000000000010000', '1110111111001000', '0000000000000010', '1110101010000111']
"""

from hackasm.assembler.assembler import Assembler, assemble, assemble_file
from hackasm.assembler.encoder import EncodingContext, InstructionEncoder
from hackasm.assembler.parser import (
    ComputeFields,
    LineKind,
    SourceLine,
    classify_line,
    clean_source,
    split_compute,
)
from hackasm.assembler.symbols import (
    Symbol,
    SymbolKind,
    SymbolTable,
    SymbolTableBuilder,
)
from hackasm.assembler.tables import (
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    PREDEFINED_SYMBOLS,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Passes
    "SymbolTableBuilder",
    "InstructionEncoder",
    "EncodingContext",
    # Symbols
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Parsing
    "ComputeFields",
    "LineKind",
    "SourceLine",
    "classify_line",
    "clean_source",
    "split_compute",
    # Tables
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "PREDEFINED_SYMBOLS",
]
