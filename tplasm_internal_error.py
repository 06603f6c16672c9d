#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

# tplasm_internal_error.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


# ICE codes are raised as exceptions when a generation pass breaks the
# assembler's push/pop, indent or line discipline. They are never user-facing
# diagnostics.
ICE_CODES: Dict[str, str] = {
    "ICE-2010": "output-variable stack is empty",
    "ICE-2020": "indent would drop below zero",
    "ICE-2021": "indent amount is negative",
    "ICE-2030": "a line is already open",
    "ICE-2031": "no line is open",
    "ICE-2040": "unknown code style",
    "ICE-9999": "unclassified internal generator error",
}


@dataclass(frozen=True)
class ICELocation:
    unit: Optional[str]
    line: Optional[int]


class InternalGeneratorError(RuntimeError):
    """
    ICE = generator bug / violated assembler contract.
    Not for template author mistakes.
    """

    def __init__(self, message: str, loc: ICELocation | None = None):
        super().__init__(message)
        self.message = message
        self.loc = loc

    def format(self) -> str:
        message = self.message
        if "[ICE-" not in message:
            message = f"[ICE-9999] {message}"
        if self.loc and self.loc.unit:
            if self.loc.line is not None:
                return f"{self.loc.unit}:{self.loc.line}: internal generator error: {message}"
            return f"{self.loc.unit}: internal generator error: {message}"
        return f"internal generator error: {message}"


class EmptyStackError(InternalGeneratorError):
    """The current output variable was read or changed while none was pushed."""


class InvalidIndentError(InternalGeneratorError):
    """An indent change would take the indent depth below zero."""


class LineStateError(InternalGeneratorError):
    """A multi-call line was started twice, or continued without being started."""


class UnknownCodeStyleError(InternalGeneratorError):
    """No output-variable strategy exists for the requested code style."""
