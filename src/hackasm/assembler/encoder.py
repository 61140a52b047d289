"""
Instruction Encoder (Second Pass)
=================================

Turns the label-free instruction stream into 16-bit binary words.

Address instructions
--------------------
``@value`` with a decimal literal encodes the literal directly. Any other
operand is a symbol: labels and predefined symbols are already in the
table; anything else is a variable and gets the next free RAM address,
starting at 16, the first time it is seen.

    @2      -> 0000000000000010
    @i      -> 0000000000010000   (first variable, RAM 16)

Compute instructions
--------------------
``dest=comp;jump`` encodes as ``111`` + a + comp + dest + jump:

    D=D+1   -> 111 0 011111 010 000

Variable allocation state lives in an EncodingContext that is created
fresh for every call to ``encode``, so encoding the same program twice
gives the same result.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from hackasm.assembler.parser import (
    LineKind,
    address_operand,
    classify_line,
    is_numeric_literal,
    split_compute,
)
from hackasm.assembler.symbols import SymbolKind, SymbolTable
from hackasm.assembler.tables import (
    COMP_TABLE,
    COMPUTE_PREFIX,
    DEST_TABLE,
    JUMP_TABLE,
    MAX_ADDRESS,
    VARIABLE_BASE,
    a_bit,
    to_address_word,
)
from hackasm.errors import AddressRangeError, UnknownMnemonicError

logger = logging.getLogger(__name__)


@dataclass
class EncodingContext:
    """
    Mutable state for one encoding run.

    Attributes:
        table: Symbol table shared with the first pass
        next_variable: RAM address the next new variable will receive
    """
    table: SymbolTable
    next_variable: int = VARIABLE_BASE

    def allocate_variable(self, name: str) -> int:
        """Bind a new variable to the next free RAM address."""
        address = self.table.bind(name, self.next_variable, SymbolKind.VARIABLE)
        logger.debug(f"Variable '{name}' -> RAM {address}")
        self.next_variable += 1
        return address


class InstructionEncoder:
    """
    Second pass: resolve symbols and encode every instruction.

    Usage:
        words = InstructionEncoder().encode(instructions, table)
    """

    def encode(self, lines: Sequence[str], table: SymbolTable) -> list[str]:
        """
        Encode a label-free instruction sequence.

        Args:
            lines: Instructions from the first pass, in ROM order
            table: Symbol table from the first pass; new variables are
                   added to it

        Returns:
            One 16-character '0'/'1' string per input line, in order

        Raises:
            UnknownMnemonicError: A compute field has no table entry
            AddressRangeError: An address does not fit in 15 bits
        """
        context = EncodingContext(table)
        words = [
            self.encode_instruction(line, context, index)
            for index, line in enumerate(lines)
        ]
        variable_count = context.next_variable - VARIABLE_BASE
        logger.info(f"Pass 2: {len(words)} words, {variable_count} variables")
        return words

    def encode_instruction(
        self, line: str, context: EncodingContext, index: Optional[int] = None
    ) -> str:
        """Encode a single address or compute instruction."""
        if classify_line(line) is LineKind.ADDRESS:
            return self.encode_address(line, context, index)
        return self.encode_compute(line, index)

    def encode_address(
        self, line: str, context: EncodingContext, index: Optional[int] = None
    ) -> str:
        """Encode ``@literal`` or ``@symbol``, allocating new variables."""
        operand = address_operand(line)

        if is_numeric_literal(operand):
            value = int(operand)
        elif operand in context.table:
            value = context.table[operand]
        else:
            value = context.allocate_variable(operand)

        if value > MAX_ADDRESS:
            raise AddressRangeError(value, line, index=index)
        return to_address_word(value)

    def encode_compute(self, line: str, index: Optional[int] = None) -> str:
        """Encode ``dest=comp;jump``."""
        fields = split_compute(line)
        comp = _lookup(COMP_TABLE, "comp", fields.comp, line, index)
        dest = _lookup(DEST_TABLE, "dest", fields.dest, line, index)
        jump = _lookup(JUMP_TABLE, "jump", fields.jump, line, index)
        return COMPUTE_PREFIX + a_bit(fields.comp) + comp + dest + jump


def _lookup(
    table: Mapping[str, str],
    field: str,
    mnemonic: str,
    instruction: str,
    index: Optional[int],
) -> str:
    try:
        return table[mnemonic]
    except KeyError:
        raise UnknownMnemonicError(
            field, mnemonic, instruction, index=index, valid=list(table)
        ) from None
