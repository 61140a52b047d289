"""
Hack Assembly Parser
====================

Line-level parsing for Hack assembly. The language is line oriented: each
non-blank line holds exactly one of

- a label declaration: ``(LOOP)``
- an address instruction: ``@17``, ``@i``, ``@LOOP``
- a compute instruction: ``dest=comp;jump`` with dest and jump optional

This module provides:

- **clean_source**: strip comments, whitespace and blank lines from raw
  source text, keeping line numbers for error reporting
- **classify_line**: decide which of the three kinds a line is
- **split_compute**: break a compute instruction into its named fields

Classification is purely syntactic. A line that only looks like a label
(for example ``(LOOP`` with no closing parenthesis) is classified as a
compute instruction and fails later when its fields are looked up.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto

from hackasm.assembler.tables import (
    ADDRESS_MARKER,
    ASSIGN_DELIMITER,
    JUMP_DELIMITER,
    LABEL_CLOSE,
    LABEL_OPEN,
    NO_FIELD,
)


COMMENT_MARKER = "//"

# Digits only: "-1" and "+1" are not literals, they are (odd) symbol names.
_LITERAL_RE = re.compile(r"[0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")


# =============================================================================
# Source Lines
# =============================================================================

@dataclass(frozen=True)
class SourceLine:
    """
    A cleaned line of assembly together with where it came from.

    Attributes:
        text: Instruction text with comments and whitespace removed
        line: 1-based line number in the original source
        original: The line as written (minus trailing newline)
    """
    text: str
    line: int
    original: str


def clean_source(source: str) -> list[SourceLine]:
    """
    Reduce raw source text to the instruction lines the passes consume.

    ``//`` comments are removed, all whitespace is dropped (Hack syntax
    has none that is significant) and lines left empty are skipped.

    Args:
        source: Complete assembly source text

    Returns:
        Cleaned lines in source order
    """
    lines = []
    for number, raw in enumerate(source.splitlines(), start=1):
        text = raw.split(COMMENT_MARKER, 1)[0]
        text = _WHITESPACE_RE.sub("", text)
        if text:
            lines.append(SourceLine(text=text, line=number, original=raw.rstrip()))
    return lines


# =============================================================================
# Line Classification
# =============================================================================

class LineKind(Enum):
    """The three kinds of Hack assembly line."""
    LABEL = auto()      # (name)
    ADDRESS = auto()    # @operand
    COMPUTE = auto()    # dest=comp;jump

    def __str__(self) -> str:
        return self.name.lower()


def is_label(line: str) -> bool:
    """Return True if the line is a label declaration such as ``(LOOP)``."""
    return line.startswith(LABEL_OPEN) and line.endswith(LABEL_CLOSE)


def classify_line(line: str) -> LineKind:
    """Classify an instruction line as label, address or compute."""
    if is_label(line):
        return LineKind.LABEL
    if line.startswith(ADDRESS_MARKER):
        return LineKind.ADDRESS
    return LineKind.COMPUTE


def label_name(line: str) -> str:
    """Extract the name from a label declaration: ``(LOOP)`` -> ``LOOP``."""
    return line[len(LABEL_OPEN):-len(LABEL_CLOSE)]


def address_operand(line: str) -> str:
    """Extract the operand from an address instruction: ``@i`` -> ``i``."""
    return line[len(ADDRESS_MARKER):]


def is_numeric_literal(operand: str) -> bool:
    """Return True if an address operand is a non-negative decimal literal."""
    return _LITERAL_RE.fullmatch(operand) is not None


# =============================================================================
# Compute Instruction Fields
# =============================================================================

@dataclass(frozen=True)
class ComputeFields:
    """
    The three parts of a compute instruction.

    Omitted parts hold the mnemonic "null", which has an entry in both
    the dest and jump tables.
    """
    dest: str
    comp: str
    jump: str


def split_compute(line: str) -> ComputeFields:
    """
    Split a compute instruction at its first ``=`` and first ``;``.

    Examples:
        >>> split_compute("D=D+1")
        ComputeFields(dest='D', comp='D+1', jump='null')
        >>> split_compute("0;JMP")
        ComputeFields(dest='null', comp='0', jump='JMP')
        >>> split_compute("AM=M-1;JNE")
        ComputeFields(dest='AM', comp='M-1', jump='JNE')
    """
    eq = line.find(ASSIGN_DELIMITER)
    semi = line.find(JUMP_DELIMITER)

    if eq != -1 and semi != -1:
        return ComputeFields(
            dest=line[:eq],
            comp=line[eq + 1:semi],
            jump=line[semi + 1:],
        )
    if eq != -1:
        return ComputeFields(dest=line[:eq], comp=line[eq + 1:], jump=NO_FIELD)
    if semi != -1:
        return ComputeFields(dest=NO_FIELD, comp=line[:semi], jump=line[semi + 1:])
    return ComputeFields(dest=NO_FIELD, comp=line, jump=NO_FIELD)
