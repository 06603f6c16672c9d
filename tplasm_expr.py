"""
Target-language expressions

A TargetExpr is an opaque piece of generated source text plus the precedence
of its outermost operator. The assembler never looks inside the text; only the
concatenation helpers below use the precedence to decide on parentheses.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Tuple, Union

from tplasm_string_escape import encode_js_string_body, encode_py_string_body


class Precedence(IntEnum):
    """Operator precedence ranks; higher binds tighter."""
    CONDITIONAL = 1
    OR = 2
    AND = 3
    EQUALITY = 4
    RELATIONAL = 5
    PLUS = 6
    TIMES = 7
    UNARY = 8
    PRIMARY = 2 ** 31 - 1  # literals, names, calls: never need parentheses


@dataclass(frozen=True)
class TargetExpr:
    text: str
    precedence: int = Precedence.PRIMARY
    is_string: bool = False  # statically known to evaluate to a string


EMPTY_STRING = TargetExpr("''", Precedence.PRIMARY, is_string=True)


def js_string_literal(value: str) -> TargetExpr:
    """Build a single-quoted JS string literal expression for `value`."""
    return TargetExpr(f"'{encode_js_string_body(value)}'", Precedence.PRIMARY, is_string=True)


def py_string_literal(value: str) -> TargetExpr:
    """Build a single-quoted Python string literal expression for `value`."""
    return TargetExpr(f"'{encode_py_string_body(value)}'", Precedence.PRIMARY, is_string=True)


def concat_js_exprs(exprs: Sequence[TargetExpr]) -> TargetExpr:
    """
    Join JS expressions with the `+` operator.

    The first operand is parenthesized only when its precedence is strictly
    lower than `+`; later operands also when it is equal, since `+` is
    left-associative.
    """
    if not exprs:
        return EMPTY_STRING
    if len(exprs) == 1:
        return exprs[0]

    parts = []
    for i, expr in enumerate(exprs):
        if i == 0:
            needs_parens = expr.precedence < Precedence.PLUS
        else:
            needs_parens = expr.precedence <= Precedence.PLUS
        parts.append(f"({expr.text})" if needs_parens else expr.text)
    return TargetExpr(" + ".join(parts), Precedence.PLUS,
                      is_string=any(e.is_string for e in exprs[:2]))


def concat_js_exprs_force_string(exprs: Sequence[TargetExpr]) -> TargetExpr:
    """
    Join JS expressions with `+`, seeded with the empty string literal.

    With the seed in front, `2 + 2` style operands concatenate to '22'
    instead of summing to 4.
    """
    return concat_js_exprs([EMPTY_STRING, *exprs])


def to_py_string(expr: TargetExpr) -> TargetExpr:
    """Wrap a Python expression in str(...) unless it is already a string."""
    if expr.is_string:
        return expr
    return TargetExpr(f"str({expr.text})", Precedence.PRIMARY, is_string=True)


def concat_py_exprs(exprs: Sequence[TargetExpr]) -> TargetExpr:
    """Join Python expressions into one string expression via ''.join([...])."""
    if not exprs:
        return EMPTY_STRING
    if len(exprs) == 1:
        return to_py_string(exprs[0])
    items = ", ".join(to_py_string(e).text for e in exprs)
    return TargetExpr(f"''.join([{items}])", Precedence.PRIMARY, is_string=True)


def as_target_expr(item: Union[TargetExpr, Tuple[str, int]]) -> TargetExpr:
    """Accept a TargetExpr or a plain (text, precedence) pair."""
    if isinstance(item, TargetExpr):
        return item
    text, precedence = item
    return TargetExpr(text, precedence)
