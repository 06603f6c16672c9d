"""
Code Assembler

Accumulates generated target-language statements into an indented line buffer
and tracks the stack of output variables. Knows nothing about any particular
target language: declaring and writing to an output variable is delegated to
the OutputVarStrategy selected at construction.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, NoReturn, Optional, Tuple, Type, Union

from tplasm_context import GenerationContext
from tplasm_expr import TargetExpr, as_target_expr
from tplasm_internal_error import (
    EmptyStackError, ICELocation, InternalGeneratorError, InvalidIndentError, LineStateError,
)
from tplasm_logger import log_debug

if TYPE_CHECKING:
    from tplasm_backends import OutputVarStrategy


@dataclass
class OutputVarFrame:
    """One output-variable stack entry."""
    name: str
    initialized: bool = False


@dataclass
class CodeAssembler:
    """
    Indentation-aware line buffer plus output-variable stack.

    Usage:
        asm = new_assembler(GenerationContext(code_style=CodeStyle.STRINGBUILDER))
        asm.append_line("story.title = function(opt_data) {")
        asm.increase_indent()
        asm.push_output_var("output")
        asm.init_output_var_if_necessary()
        asm.push_output_var("temp")
        asm.add_to_output_var([js_string_literal("Snow White and the "),
                               TargetExpr("opt_data.numDwarfs")])
        asm.pop_output_var()
        asm.add_to_output_var([TargetExpr("temp"), js_string_literal(" Dwarfs")])
        asm.append_line_start("return ").append_output_var_name().append_line_end(".toString();")
        asm.pop_output_var()
        asm.decrease_indent()
        asm.append_line("}")

    builds:
        story.title = function(opt_data) {
          var output = new soy.StringBuilder();
          var temp = new soy.StringBuilder('Snow White and the ', opt_data.numDwarfs);
          output.append(temp, ' Dwarfs');
          return output.toString();
        }
    """
    strategy: OutputVarStrategy
    context: GenerationContext = field(default_factory=GenerationContext.default)

    lines: List[str] = field(default_factory=list)
    _indent_depth: int = 0
    _frames: List[OutputVarFrame] = field(default_factory=list)
    _open_line: Optional[List[str]] = None
    _name_counter: int = 0

    # ============================================================================
    # Errors
    # ============================================================================

    def ice(self, error_cls: Type[InternalGeneratorError], message: str) -> NoReturn:
        """Raise an internal generator error located at the line being generated."""
        raise error_cls(message, ICELocation(unit=self.context.unit_name, line=len(self.lines) + 1))

    # ============================================================================
    # Indentation
    # ============================================================================

    @property
    def indent_depth(self) -> int:
        return self._indent_depth

    @property
    def indent_str(self) -> str:
        return " " * (self.context.indent_width * self._indent_depth)

    def increase_indent(self, amount: int = 1) -> None:
        if amount < 0:
            self.ice(InvalidIndentError, f"[ICE-2021] increase_indent amount is negative: {amount}")
        self._change_indent(amount)

    def decrease_indent(self, amount: int = 1) -> None:
        if amount < 0:
            self.ice(InvalidIndentError, f"[ICE-2021] decrease_indent amount is negative: {amount}")
        self._change_indent(-amount)

    def _change_indent(self, delta: int) -> None:
        if self._indent_depth + delta < 0:
            self.ice(InvalidIndentError,
                     f"[ICE-2020] cannot decrease indent by {-delta} from depth {self._indent_depth}")
        self._indent_depth += delta

    # ============================================================================
    # Line emission
    # ============================================================================

    @property
    def has_open_line(self) -> bool:
        return self._open_line is not None

    def append_line(self, *parts: str) -> None:
        """Emit one complete line with current indentation."""
        if self._open_line is not None:
            self.ice(LineStateError, "[ICE-2030] append_line called while a line is open")
        self.lines.append(self.indent_str + "".join(parts))

    def append_line_start(self, *parts: str) -> CodeAssembler:
        """Open a line; indentation is applied here, once."""
        if self._open_line is not None:
            self.ice(LineStateError, "[ICE-2030] append_line_start called while a line is open")
        self._open_line = [self.indent_str, *parts]
        return self

    def append(self, *parts: str) -> CodeAssembler:
        """Continue the open line."""
        if self._open_line is None:
            self.ice(LineStateError, "[ICE-2031] append called with no open line")
        self._open_line.extend(parts)
        return self

    def append_output_var_name(self) -> CodeAssembler:
        """Continue the open line with the current output variable name."""
        return self.append(self.get_output_var_name())

    def append_line_end(self, *parts: str) -> None:
        """Finish the open line and commit it to the buffer."""
        if self._open_line is None:
            self.ice(LineStateError, "[ICE-2031] append_line_end called with no open line")
        self._open_line.extend(parts)
        self.lines.append("".join(self._open_line))
        self._open_line = None

    def get_code(self) -> str:
        """Returns all committed lines joined by newlines. An open line is not included."""
        return "\n".join(self.lines)

    # ============================================================================
    # Output-variable stack
    # ============================================================================

    @property
    def output_var_depth(self) -> int:
        return len(self._frames)

    def push_output_var(self, name: str) -> None:
        self._frames.append(OutputVarFrame(name))
        log_debug(self.context, f"Pushed output variable '{name}' (depth {len(self._frames)})")

    def pop_output_var(self) -> None:
        frame = self._current_frame("pop_output_var")
        self._frames.pop()
        log_debug(self.context, f"Popped output variable '{frame.name}' (depth {len(self._frames)})")

    def set_output_var_inited(self) -> None:
        self._current_frame("set_output_var_inited").initialized = True

    def get_output_var_is_inited(self) -> bool:
        return self._current_frame("get_output_var_is_inited").initialized

    def get_output_var_name(self) -> str:
        return self._current_frame("get_output_var_name").name

    def _current_frame(self, op: str) -> OutputVarFrame:
        if not self._frames:
            self.ice(EmptyStackError, f"[ICE-2010] {op} called with no current output variable")
        return self._frames[-1]

    def fresh_var_name(self, prefix: str = "temp") -> str:
        """
        Generate a variable name unique within this assembler.

        Returns names like "temp1", "temp2", ... (the counter is shared by all prefixes).
        """
        self._name_counter += 1
        return f"{prefix}{self._name_counter}"

    # ============================================================================
    # Strategy delegation
    # ============================================================================

    def init_output_var_if_necessary(self) -> None:
        """Declare the current output variable unless it already is."""
        self.strategy.init_output_var_if_necessary(self)

    def add_to_output_var(self, exprs: Iterable[Union[TargetExpr, Tuple[str, int]]]) -> None:
        """
        Fold expressions into the current output variable.

        Items may be TargetExpr instances or plain (text, precedence) pairs.
        """
        target_exprs: List[TargetExpr] = [as_target_expr(e) for e in exprs]
        self.strategy.add_to_output_var(self, target_exprs)
