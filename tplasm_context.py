"""
Generation context for cross-cutting assembler options.

This module defines the GenerationContext dataclass which holds the options
that are fixed for the lifetime of one code-generation unit: which output
strategy to use, how wide an indent unit is, and how chatty logging should be.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """Hierarchical logging levels for the template assembler."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages
    DEBUG = 30      # Detailed per-statement information


class CodeStyle(Enum):
    """Strategy used to accumulate rendered output into an output variable."""
    STRINGBUILDER = "stringbuilder"  # JS: var output = new soy.StringBuilder(...)
    CONCAT = "concat"                # JS: var output = '' + ...
    PY_JOIN = "py_join"              # Python: output = ''.join([...])


@dataclass(frozen=True)
class GenerationContext:
    """
    Holds options shared by one generation pass.

    Attributes:
        code_style:         Output-variable strategy; fixed for the assembler lifetime.
        indent_width:       Number of spaces in one indent unit.
        unit_name:          Optional name of the unit being generated (e.g. a template
                            name). Shows up in internal error locations and logs.
        log_rich_format:    If True, emit logs with timestamp and level prefix.
        log_level:          Current logging level.
    """
    code_style: CodeStyle = CodeStyle.CONCAT
    indent_width: int = 2
    unit_name: Optional[str] = None
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be >= 0, got {self.indent_width}")

    @staticmethod
    def default() -> 'GenerationContext':
        """Create a GenerationContext with default settings."""
        return GenerationContext(log_level=LogLevel.WARNING)
