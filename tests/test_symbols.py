# =============================================================================
# test_symbols.py - Symbol Table and First Pass Tests
# =============================================================================
# Tests for SymbolTable binding rules and SymbolTableBuilder label
# resolution.
#
# Test coverage includes:
#   - Predefined contents of a fresh table
#   - First-wins binding
#   - Label addresses and label line removal
#   - Duplicate labels (default and strict)
# =============================================================================

import pytest

from hackasm.assembler.symbols import (
    SymbolKind,
    SymbolTable,
    SymbolTableBuilder,
)
from hackasm.assembler.tables import PREDEFINED_SYMBOLS
from hackasm.errors import DuplicateSymbolError


# =============================================================================
# Symbol Table
# =============================================================================

class TestSymbolTable:
    """Test the symbol table itself."""

    def test_starts_with_predefined(self):
        table = SymbolTable()
        assert table.to_dict() == dict(PREDEFINED_SYMBOLS)
        assert all(sym.kind is SymbolKind.PREDEFINED for sym in table.symbols())

    def test_bind_new(self):
        table = SymbolTable()
        assert table.bind("LOOP", 4, SymbolKind.LABEL) == 4
        assert table["LOOP"] == 4
        assert "LOOP" in table
        assert table.lookup("LOOP").kind is SymbolKind.LABEL

    def test_bind_existing_keeps_first(self):
        table = SymbolTable()
        table.bind("x", 16, SymbolKind.VARIABLE)
        assert table.bind("x", 99, SymbolKind.VARIABLE) == 16
        assert table["x"] == 16

    def test_predefined_cannot_be_rebound(self):
        table = SymbolTable()
        assert table.bind("SCREEN", 5, SymbolKind.LABEL) == 16384
        assert table.lookup("SCREEN").kind is SymbolKind.PREDEFINED

    def test_case_sensitive(self):
        table = SymbolTable()
        assert "sp" not in table
        assert "SP" in table

    def test_missing_symbol(self):
        table = SymbolTable()
        assert table.lookup("nope") is None
        with pytest.raises(KeyError):
            table["nope"]

    def test_symbols_by_kind(self):
        table = SymbolTable()
        table.bind("END", 3, SymbolKind.LABEL)
        table.bind("i", 16, SymbolKind.VARIABLE)
        assert [s.name for s in table.symbols(SymbolKind.LABEL)] == ["END"]
        assert [s.name for s in table.symbols(SymbolKind.VARIABLE)] == ["i"]

    def test_tables_are_independent(self):
        first = SymbolTable()
        first.bind("LOOP", 1, SymbolKind.LABEL)
        assert "LOOP" not in SymbolTable()


# =============================================================================
# First Pass
# =============================================================================

class TestSymbolTableBuilder:
    """Test label resolution and stream filtering."""

    def test_no_labels_leaves_predefined_only(self):
        lines = ["@2", "D=A", "@3", "D=D+A", "@0", "M=D"]
        table, instructions = SymbolTableBuilder().build(lines)
        assert table.to_dict() == dict(PREDEFINED_SYMBOLS)
        assert instructions == lines

    def test_label_counts_preceding_instructions(self):
        lines = ["(LOOP)", "@1", "D=A", "M=D", "@LOOP"]
        table, instructions = SymbolTableBuilder().build(lines)
        assert table["LOOP"] == 0

        lines = ["@1", "D=A", "M=D", "(LOOP)", "@LOOP"]
        table, instructions = SymbolTableBuilder().build(lines)
        assert table["LOOP"] == 3

    def test_labels_removed_from_stream(self):
        lines = ["(START)", "@1", "(MID)", "D=A", "(END)"]
        table, instructions = SymbolTableBuilder().build(lines)
        assert instructions == ["@1", "D=A"]

    def test_consecutive_labels_share_address(self):
        table, _ = SymbolTableBuilder().build(["@0", "(A1)", "(A2)", "D=A"])
        assert table["A1"] == 1
        assert table["A2"] == 1

    def test_trailing_label(self):
        """A label at the end points one past the last instruction."""
        table, instructions = SymbolTableBuilder().build(["@0", "0;JMP", "(END)"])
        assert table["END"] == 2
        assert len(instructions) == 2

    def test_duplicate_label_first_wins(self):
        lines = ["(X)", "@1", "(X)", "@2"]
        table, instructions = SymbolTableBuilder().build(lines)
        assert table["X"] == 0
        assert instructions == ["@1", "@2"]

    def test_duplicate_label_strict(self):
        lines = ["(X)", "@1", "(X)", "@2"]
        with pytest.raises(DuplicateSymbolError) as exc_info:
            SymbolTableBuilder(strict=True).build(lines)
        assert exc_info.value.symbol == "X"
        assert exc_info.value.original_address == 0
        assert exc_info.value.index == 2

    def test_label_named_like_predefined_is_ignored(self):
        table, _ = SymbolTableBuilder().build(["@0", "(R1)", "D=A"])
        assert table["R1"] == 1
        assert table.lookup("R1").kind is SymbolKind.PREDEFINED

    def test_malformed_label_kept_as_instruction(self):
        table, instructions = SymbolTableBuilder().build(["(LOOP", "@1"])
        assert "LOOP" not in table
        assert instructions == ["(LOOP", "@1"]

    def test_variables_not_bound_in_first_pass(self):
        table, _ = SymbolTableBuilder().build(["@i", "M=1"])
        assert "i" not in table

    def test_input_not_modified(self):
        lines = ["(L)", "@L"]
        SymbolTableBuilder().build(lines)
        assert lines == ["(L)", "@L"]
