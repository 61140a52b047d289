"""
hackasm Command-Line Interface
=============================

- **hackasm**: Hack assembler

Implemented as a Click-based CLI application with help and error
reporting shared through cli.errors.
"""

__all__ = ["hackasm"]
