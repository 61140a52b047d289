# =============================================================================
# test_parser.py - Line Parsing Tests
# =============================================================================
# Tests for source cleaning, line classification and the compute
# instruction field split.
# =============================================================================

import pytest

from hackasm.assembler.parser import (
    ComputeFields,
    LineKind,
    SourceLine,
    address_operand,
    classify_line,
    clean_source,
    is_numeric_literal,
    label_name,
    split_compute,
)


# =============================================================================
# Source Cleaning
# =============================================================================

class TestCleanSource:
    """Test comment, whitespace and blank line removal."""

    def test_strips_comments_and_blanks(self):
        source = (
            "// Computes R2 = R0 + R1\n"
            "\n"
            "   @R0      // first operand\n"
            "   D=M\n"
        )
        lines = clean_source(source)
        assert [line.text for line in lines] == ["@R0", "D=M"]

    def test_removes_inner_whitespace(self):
        lines = clean_source("  D = M + 1 ; JGT\n")
        assert lines[0].text == "D=M+1;JGT"

    def test_keeps_line_numbers(self):
        lines = clean_source("// header\n\n@1\n\n(END)\n")
        assert lines == [
            SourceLine(text="@1", line=3, original="@1"),
            SourceLine(text="(END)", line=5, original="(END)"),
        ]

    def test_original_text_preserved(self):
        lines = clean_source("\tM=D   // store\n")
        assert lines[0].original == "\tM=D   // store"

    def test_comment_only_source(self):
        assert clean_source("// nothing here\n   \n") == []

    def test_windows_line_endings(self):
        lines = clean_source("@1\r\nD=A\r\n")
        assert [line.text for line in lines] == ["@1", "D=A"]


# =============================================================================
# Classification
# =============================================================================

class TestClassifyLine:
    """Test label / address / compute classification."""

    @pytest.mark.parametrize("line,kind", [
        ("(LOOP)", LineKind.LABEL),
        ("()", LineKind.LABEL),
        ("@17", LineKind.ADDRESS),
        ("@LOOP", LineKind.ADDRESS),
        ("D=M", LineKind.COMPUTE),
        ("0;JMP", LineKind.COMPUTE),
        ("(LOOP", LineKind.COMPUTE),
        ("LOOP)", LineKind.COMPUTE),
    ])
    def test_kinds(self, line, kind):
        assert classify_line(line) is kind

    def test_label_name(self):
        assert label_name("(LOOP)") == "LOOP"
        assert label_name("(ponggame.run$if.1)") == "ponggame.run$if.1"

    def test_address_operand(self):
        assert address_operand("@sum") == "sum"
        assert address_operand("@") == ""

    @pytest.mark.parametrize("operand,expected", [
        ("0", True),
        ("32767", True),
        ("007", True),
        ("-1", False),
        ("+1", False),
        ("i", False),
        ("1a", False),
        ("", False),
    ])
    def test_numeric_literal(self, operand, expected):
        assert is_numeric_literal(operand) is expected


# =============================================================================
# Compute Split
# =============================================================================

class TestSplitCompute:
    """Test splitting dest=comp;jump into named fields."""

    def test_both_delimiters(self):
        assert split_compute("AM=M-1;JNE") == ComputeFields("AM", "M-1", "JNE")

    def test_assignment_only(self):
        assert split_compute("D=D+1") == ComputeFields("D", "D+1", "null")

    def test_jump_only(self):
        assert split_compute("D;JGT") == ComputeFields("null", "D", "JGT")

    def test_comp_only(self):
        assert split_compute("D+1") == ComputeFields("null", "D+1", "null")

    def test_fields_are_named(self):
        fields = split_compute("MD=M+1")
        assert fields.dest == "MD"
        assert fields.comp == "M+1"
        assert fields.jump == "null"

    def test_first_delimiter_wins(self):
        """Only the first '=' and ';' split the text."""
        assert split_compute("A=B=C") == ComputeFields("A", "B=C", "null")
        assert split_compute("0;JMP;X") == ComputeFields("null", "0", "JMP;X")

    def test_fields_are_frozen(self):
        fields = split_compute("D=A")
        with pytest.raises(Exception):
            fields.dest = "M"
