"""
Output-variable strategies

Each strategy knows how one target backend declares an output variable and how
it folds rendered expressions into it. Strategies emit lines and mark frames
initialized through the CodeAssembler; all indentation and stack bookkeeping
stays in the assembler.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from tplasm_assembler import CodeAssembler
from tplasm_context import CodeStyle, GenerationContext
from tplasm_expr import TargetExpr, concat_js_exprs, concat_js_exprs_force_string, concat_py_exprs
from tplasm_internal_error import ICELocation, UnknownCodeStyleError
from tplasm_logger import log_debug, log_stage


class OutputVarStrategy(ABC):
    """Capability interface: declare the current output variable, and write to it."""

    @abstractmethod
    def init_output_var_if_necessary(self, asm: CodeAssembler) -> None:
        ...

    @abstractmethod
    def add_to_output_var(self, asm: CodeAssembler, exprs: Sequence[TargetExpr]) -> None:
        ...


@dataclass(frozen=True)
class StringBuilderStrategy(OutputVarStrategy):
    """
    JS buffered-append output:

        var output = new soy.StringBuilder();
        output.append(AAA, BBB);

    The first write to an undeclared variable seeds the constructor instead:

        var output = new soy.StringBuilder(AAA, BBB);
    """
    builder_class: str = "soy.StringBuilder"

    def init_output_var_if_necessary(self, asm: CodeAssembler) -> None:
        if asm.get_output_var_is_inited():
            return
        asm.append_line("var ", asm.get_output_var_name(), f" = new {self.builder_class}();")
        asm.set_output_var_inited()
        log_debug(asm.context, f"Declared buffer '{asm.get_output_var_name()}'")

    def add_to_output_var(self, asm: CodeAssembler, exprs: Sequence[TargetExpr]) -> None:
        if not exprs:
            self.init_output_var_if_necessary(asm)
            return
        inited = asm.get_output_var_is_inited()
        args = ", ".join(e.text for e in exprs)
        if inited:
            asm.append_line(asm.get_output_var_name(), ".append(", args, ");")
        else:
            asm.append_line("var ", asm.get_output_var_name(), f" = new {self.builder_class}(", args, ");")
            asm.set_output_var_inited()
            log_debug(asm.context, f"Declared buffer '{asm.get_output_var_name()}' with seed")


@dataclass(frozen=True)
class ConcatStrategy(OutputVarStrategy):
    """
    JS string-concatenation output:

        var output = '';
        output += AAA + BBB;

    The first write to an undeclared variable is seeded with '' so the
    right-hand side is always string concatenation:

        var output = '' + AAA + BBB;
    """

    def init_output_var_if_necessary(self, asm: CodeAssembler) -> None:
        if asm.get_output_var_is_inited():
            return
        asm.append_line("var ", asm.get_output_var_name(), " = '';")
        asm.set_output_var_inited()
        log_debug(asm.context, f"Declared string '{asm.get_output_var_name()}'")

    def add_to_output_var(self, asm: CodeAssembler, exprs: Sequence[TargetExpr]) -> None:
        if not exprs:
            self.init_output_var_if_necessary(asm)
            return
        inited = asm.get_output_var_is_inited()
        if inited:
            asm.append_line(asm.get_output_var_name(), " += ", concat_js_exprs(exprs).text, ";")
        else:
            contents = concat_js_exprs_force_string(exprs).text
            asm.append_line("var ", asm.get_output_var_name(), " = ", contents, ";")
            asm.set_output_var_inited()
            log_debug(asm.context, f"Declared string '{asm.get_output_var_name()}' with seed")


@dataclass(frozen=True)
class PyJoinStrategy(OutputVarStrategy):
    """
    Python output, built with ''.join over a list:

        output = ''
        output += ''.join([AAA, str(BBB)])

    The first write to an undeclared variable assigns directly:

        output = ''.join([AAA, str(BBB)])
    """

    def init_output_var_if_necessary(self, asm: CodeAssembler) -> None:
        if asm.get_output_var_is_inited():
            return
        asm.append_line(asm.get_output_var_name(), " = ''")
        asm.set_output_var_inited()
        log_debug(asm.context, f"Declared string '{asm.get_output_var_name()}'")

    def add_to_output_var(self, asm: CodeAssembler, exprs: Sequence[TargetExpr]) -> None:
        if not exprs:
            self.init_output_var_if_necessary(asm)
            return
        inited = asm.get_output_var_is_inited()
        contents = concat_py_exprs(exprs).text
        if inited:
            asm.append_line(asm.get_output_var_name(), " += ", contents)
        else:
            asm.append_line(asm.get_output_var_name(), " = ", contents)
            asm.set_output_var_inited()
            log_debug(asm.context, f"Declared string '{asm.get_output_var_name()}' with seed")


STRINGBUILDER_STRATEGY = StringBuilderStrategy()
CONCAT_STRATEGY = ConcatStrategy()
PY_JOIN_STRATEGY = PyJoinStrategy()

_STRATEGIES: Dict[CodeStyle, OutputVarStrategy] = {
    CodeStyle.STRINGBUILDER: STRINGBUILDER_STRATEGY,
    CodeStyle.CONCAT: CONCAT_STRATEGY,
    CodeStyle.PY_JOIN: PY_JOIN_STRATEGY,
}


def strategy_for_style(style: CodeStyle, unit: Optional[str] = None) -> OutputVarStrategy:
    """Return the shared strategy instance for a code style."""
    strategy = _STRATEGIES.get(style)
    if strategy is None:
        raise UnknownCodeStyleError(f"[ICE-2040] unknown code style {style!r}",
                                    ICELocation(unit=unit, line=None))
    return strategy


def new_assembler(context: Optional[GenerationContext] = None) -> CodeAssembler:
    """Create a CodeAssembler for one generation unit, with the strategy the context selects."""
    if context is None:
        context = GenerationContext.default()
    strategy = strategy_for_style(context.code_style, context.unit_name)
    log_stage(context, "Assembling", context.unit_name)
    log_debug(context, f"Output style: {context.code_style.value}")
    return CodeAssembler(strategy=strategy, context=context)
