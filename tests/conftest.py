#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tplasm_backends import new_assembler
from tplasm_context import CodeStyle, GenerationContext


@pytest.fixture
def repo_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def make_assembler():
    """Build an assembler for a code style.

    Usage:
        def test_something(make_assembler):
            asm = make_assembler(CodeStyle.CONCAT, indent_width=4)
    """

    def _make(style: CodeStyle = CodeStyle.CONCAT, **context_kwargs):
        return new_assembler(GenerationContext(code_style=style, **context_kwargs))

    return _make


@pytest.fixture
def sb_asm(make_assembler):
    return make_assembler(CodeStyle.STRINGBUILDER)


@pytest.fixture
def concat_asm(make_assembler):
    return make_assembler(CodeStyle.CONCAT)


@pytest.fixture
def py_asm(make_assembler):
    return make_assembler(CodeStyle.PY_JOIN)
