"""
Symbol Table and First Pass
===========================

The symbol table maps names to addresses. It starts out holding the
predefined symbols (R0-R15, SP, LCL, ARG, THIS, THAT, SCREEN, KBD), gains
labels during the first pass and variables during the second.

Binding is first-wins: once a name has an address it never changes, and a
later attempt to bind the same name returns the address already held.

The first pass (SymbolTableBuilder) walks the instruction lines once,
binding each ``(LABEL)`` to the ROM address of the next real instruction
and dropping the label lines from the stream:

    @i          ROM 0
    M=1         ROM 1
    (LOOP)      LOOP -> 2, removed
    @i          ROM 2
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from hackasm.assembler.parser import is_label, label_name
from hackasm.assembler.tables import PREDEFINED_SYMBOLS
from hackasm.errors import DuplicateSymbolError

logger = logging.getLogger(__name__)


# =============================================================================
# Symbol Table Entry
# =============================================================================

class SymbolKind(Enum):
    """Where a symbol's address came from."""
    PREDEFINED = "predefined"
    LABEL = "label"
    VARIABLE = "variable"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name, case-sensitive
        address: ROM address for labels, RAM address otherwise
        kind: How the symbol was defined
    """
    name: str
    address: int
    kind: SymbolKind


# =============================================================================
# Symbol Table
# =============================================================================

class SymbolTable:
    """
    Name to address mapping for a single assembly run.

    A new table always starts with the predefined symbols. Tables are not
    meant to be reused: build a fresh one for every program.

    Usage:
        table = SymbolTable()
        table.bind("LOOP", 4, SymbolKind.LABEL)
        table["LOOP"]      # 4
        "LOOP" in table    # True
    """

    def __init__(self) -> None:
        self._symbols: dict[str, Symbol] = {
            name: Symbol(name, address, SymbolKind.PREDEFINED)
            for name, address in PREDEFINED_SYMBOLS.items()
        }

    def bind(self, name: str, address: int, kind: SymbolKind) -> int:
        """
        Bind a name to an address unless it is already bound.

        Args:
            name: Symbol name
            address: Address to bind if the name is new
            kind: Label or variable

        Returns:
            The address the name resolves to after the call (the existing
            one if the name was already present)
        """
        existing = self._symbols.get(name)
        if existing is not None:
            return existing.address
        self._symbols[name] = Symbol(name, address, kind)
        return address

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the entry for a name, or None if it is not bound."""
        return self._symbols.get(name)

    def __getitem__(self, name: str) -> int:
        return self._symbols[name].address

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def symbols(self, kind: Optional[SymbolKind] = None) -> list[Symbol]:
        """
        Return entries in binding order, optionally only one kind.

        Predefined symbols come first, then labels in declaration order,
        then variables in allocation order.
        """
        if kind is None:
            return list(self._symbols.values())
        return [sym for sym in self._symbols.values() if sym.kind is kind]

    def to_dict(self) -> dict[str, int]:
        """Return a plain name -> address copy of the table."""
        return {name: sym.address for name, sym in self._symbols.items()}


# =============================================================================
# First Pass
# =============================================================================

class SymbolTableBuilder:
    """
    First pass: resolve labels and strip them from the instruction stream.

    Usage:
        table, instructions = SymbolTableBuilder().build(lines)

    Attributes:
        strict: If True, a label declared twice raises DuplicateSymbolError
                instead of keeping the first declaration
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def build(self, lines: Sequence[str]) -> tuple[SymbolTable, list[str]]:
        """
        Scan the lines once, binding labels to ROM addresses.

        Args:
            lines: Cleaned instruction lines (no comments or blank lines)

        Returns:
            The new symbol table and the lines with label declarations removed

        Raises:
            DuplicateSymbolError: In strict mode, on a repeated label
        """
        table = SymbolTable()
        instructions: list[str] = []
        rom_address = 0

        for index, line in enumerate(lines):
            if is_label(line):
                name = label_name(line)
                existing = table.lookup(name)
                if existing is None:
                    table.bind(name, rom_address, SymbolKind.LABEL)
                    logger.debug(f"Label '{name}' -> ROM {rom_address}")
                elif self.strict:
                    raise DuplicateSymbolError(
                        name,
                        original_address=existing.address,
                        index=index,
                    )
                else:
                    logger.debug(
                        f"Label '{name}' already bound to {existing.address}, ignored"
                    )
                continue

            instructions.append(line)
            rom_address += 1

        label_count = len(table.symbols(SymbolKind.LABEL))
        logger.info(f"Pass 1: {rom_address} instructions, {label_count} labels")
        return table, instructions
