"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the hackasm package.
All exceptions inherit from HackError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
├── AssemblerError (assembler-related)
│   ├── UnknownMnemonicError - comp/dest/jump mnemonic not in its table
│   ├── DuplicateSymbolError - label declared twice (strict mode only)
│   └── AddressRangeError - address does not fit in 15 bits
└── ConfigError - invalid configuration value

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all hackasm errors.

        try:
            assembler.assemble_file("Max.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
        index: Position of the offending line in the sequence the failing
               pass was given (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        index: Optional[int] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.index = index
        super().__init__(self._format_message())

    def with_source(self, location: SourceLocation, source_line: str) -> "AssemblerError":
        """
        Attach a source location to an error raised by the core passes.

        The passes work on bare instruction text and know nothing about
        files; the Assembler calls this to point the error back at the
        original source line.
        """
        self.location = location
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:7:1: error: unknown comp mnemonic 'D+2' in 'D=D+2'
                D=D+2
                ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class UnknownMnemonicError(AssemblerError):
    """
    A compute instruction field has no entry in its lookup table.

    Raised during the second pass when the comp, dest or jump part of a
    compute instruction cannot be resolved. The error names the field
    that failed, so "D=D+2" reports an unknown comp and "X=D" reports an
    unknown dest.

    Attributes:
        field: Which field failed ("comp", "dest" or "jump")
        mnemonic: The text that was looked up
        instruction: The whole instruction text
        index: ROM address of the instruction, when known
    """

    def __init__(
        self,
        field: str,
        mnemonic: str,
        instruction: str,
        index: Optional[int] = None,
        valid: Optional[list[str]] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic
        self.instruction = instruction
        self.valid = valid or []

        hint = None
        if self.valid:
            hint = f"valid {field} mnemonics: {', '.join(self.valid)}"

        where = f" at ROM address {index}" if index is not None else ""
        super().__init__(
            f"unknown {field} mnemonic '{mnemonic}' in '{instruction}'{where}",
            location=location,
            hint=hint,
            source_line=source_line,
            index=index,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Label declared more than once.

    Only raised when strict label checking is enabled; by default the
    first declaration wins and later ones are ignored.
    """

    def __init__(
        self,
        symbol: str,
        original_address: Optional[int] = None,
        index: Optional[int] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.original_address = original_address

        hint = None
        if original_address is not None:
            hint = f"'{symbol}' is already bound to address {original_address}"

        super().__init__(
            f"duplicate symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
            index=index,
        )


class AddressRangeError(AssemblerError):
    """
    Address instruction value does not fit in 15 bits.

    The most significant bit of an address instruction is the opcode
    discriminator, which leaves bits 14-0 for the value (0..32767).
    """

    def __init__(
        self,
        value: int,
        instruction: str,
        index: Optional[int] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.instruction = instruction

        super().__init__(
            f"address {value} in '{instruction}' is out of range (0-32767)",
            location=location,
            source_line=source_line,
            index=index,
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigError(HackError):
    """
    Invalid configuration value.

    Raised when a setting read from the environment cannot be used, for
    example an output suffix of "." or one containing a path separator.
    """

    def __init__(self, setting: str, value: str, reason: str):
        self.setting = setting
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {setting} {value!r}: {reason}")
