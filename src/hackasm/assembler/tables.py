"""
Hack Instruction Set Tables
===========================

Fixed lookup tables for the Hack machine language. These never change at
runtime, so they are exposed as read-only mappings.

Compute Instruction Layout
--------------------------
A compute instruction is 16 bits wide:

    1 1 1 a c1 c2 c3 c4 c5 c6 d1 d2 d3 j1 j2 j3

- bits 15-13: opcode prefix, always 111
- bit 12 (a): 0 = ALU operand is the A register, 1 = memory cell M
- bits 11-6: ALU control bits (COMP_TABLE)
- bits 5-3: destination (DEST_TABLE)
- bits 2-0: jump condition (JUMP_TABLE)

Operations on A and on M share the same six ALU bits; only the a bit
tells them apart (``D+A`` and ``D+M`` are both 000010).

Address Instruction Layout
--------------------------
    0 v v v v v v v v v v v v v v v

Bit 15 is 0 and bits 14-0 hold the address, so the largest encodable
value is MAX_ADDRESS.
"""

from types import MappingProxyType
from typing import Mapping


# =============================================================================
# Instruction Format Constants
# =============================================================================

WORD_WIDTH = 16                 # Every encoded instruction is 16 bits
ADDRESS_WIDTH = 15              # Bits 14-0 of an address instruction
MAX_ADDRESS = (1 << ADDRESS_WIDTH) - 1

COMPUTE_PREFIX = "111"          # Bits 15-13 of a compute instruction
MEMORY_OPERAND = "M"            # Comp mnemonics mentioning M set the a bit

ADDRESS_MARKER = "@"
LABEL_OPEN = "("
LABEL_CLOSE = ")"
ASSIGN_DELIMITER = "="
JUMP_DELIMITER = ";"
NO_FIELD = "null"               # Mnemonic of an omitted dest or jump

VARIABLE_BASE = 16              # First RAM address handed to variables


# =============================================================================
# Destination Table
# =============================================================================
# d1 = A, d2 = D, d3 = M

DEST_TABLE: Mapping[str, str] = MappingProxyType({
    "null": "000",
    "M":    "001",
    "D":    "010",
    "MD":   "011",
    "A":    "100",
    "AM":   "101",
    "AD":   "110",
    "AMD":  "111",
})


# =============================================================================
# Comp (ALU) Table
# =============================================================================

COMP_TABLE: Mapping[str, str] = MappingProxyType({
    # a = 0: operand is the A register
    "0":   "101010",
    "1":   "111111",
    "-1":  "111010",
    "D":   "001100",
    "A":   "110000",
    "!D":  "001101",
    "!A":  "110001",
    "-D":  "001111",
    "-A":  "110011",
    "D+1": "011111",
    "A+1": "110111",
    "D-1": "001110",
    "A-1": "110010",
    "D+A": "000010",
    "D-A": "010011",
    "A-D": "000111",
    "D&A": "000000",
    "D|A": "010101",

    # a = 1: operand is the memory cell M
    "M":   "110000",
    "!M":  "110001",
    "-M":  "110011",
    "M+1": "110111",
    "M-1": "110010",
    "D+M": "000010",
    "D-M": "010011",
    "M-D": "000111",
    "D&M": "000000",
    "D|M": "010101",
})


# =============================================================================
# Jump Table
# =============================================================================

JUMP_TABLE: Mapping[str, str] = MappingProxyType({
    "null": "000",
    "JGT":  "001",
    "JEQ":  "010",
    "JGE":  "011",
    "JLT":  "100",
    "JNE":  "101",
    "JLE":  "110",
    "JMP":  "111",
})


# =============================================================================
# Predefined Symbols
# =============================================================================

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType({
    **{f"R{n}": n for n in range(16)},
    "SP":     0,
    "LCL":    1,
    "ARG":    2,
    "THIS":   3,
    "THAT":   4,
    "SCREEN": 0x4000,
    "KBD":    0x6000,
})


# =============================================================================
# Lookup Helpers
# =============================================================================

def uses_memory_operand(comp: str) -> bool:
    """Return True if the comp mnemonic reads the memory cell M (a bit set)."""
    return MEMORY_OPERAND in comp


def a_bit(comp: str) -> str:
    """Return the a bit for a comp mnemonic as '0' or '1'."""
    return "1" if uses_memory_operand(comp) else "0"


def to_address_word(value: int) -> str:
    """
    Format an address as a 16-character address instruction.

    The caller is responsible for range checking; values above MAX_ADDRESS
    would spill into the opcode bit.
    """
    return format(value, f"0{WORD_WIDTH}b")
