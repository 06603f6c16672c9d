#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from tplasm_expr import Precedence, TargetExpr, js_string_literal

INF = Precedence.PRIMARY


def test_init_declares_empty_buffer_once(sb_asm):
    sb_asm.push_output_var("output")
    sb_asm.init_output_var_if_necessary()
    sb_asm.init_output_var_if_necessary()

    assert sb_asm.lines == ["var output = new soy.StringBuilder();"]
    assert sb_asm.get_output_var_is_inited()


def test_first_write_seeds_declaration_then_appends(sb_asm):
    sb_asm.push_output_var("output")
    sb_asm.add_to_output_var([("'a'", INF)])
    sb_asm.add_to_output_var([("'b'", INF)])

    assert sb_asm.lines == [
        "var output = new soy.StringBuilder('a');",
        "output.append('b');",
    ]


def test_append_passes_expressions_as_raw_arguments(sb_asm):
    sb_asm.push_output_var("output")
    sb_asm.init_output_var_if_necessary()
    sb_asm.add_to_output_var([
        TargetExpr("a ? b : c", Precedence.CONDITIONAL),
        TargetExpr("x + y", Precedence.PLUS),
        TargetExpr("opt_data.name"),
    ])

    assert sb_asm.lines[-1] == "output.append(a ? b : c, x + y, opt_data.name);"


def test_empty_expression_list_declares_buffer(sb_asm):
    sb_asm.push_output_var("output")
    sb_asm.add_to_output_var([])
    sb_asm.add_to_output_var([])
    sb_asm.add_to_output_var([("'b'", INF)])

    assert sb_asm.lines == [
        "var output = new soy.StringBuilder();",
        "output.append('b');",
    ]
    assert sb_asm.get_output_var_is_inited()


def test_nested_output_vars_match_documented_example(sb_asm):
    sb_asm.append_line("story.title = function(opt_data) {")
    sb_asm.increase_indent()
    sb_asm.push_output_var("output")
    sb_asm.init_output_var_if_necessary()
    sb_asm.push_output_var("temp")
    sb_asm.add_to_output_var([js_string_literal("Snow White and the "), TargetExpr("opt_data.numDwarfs")])
    sb_asm.pop_output_var()
    sb_asm.add_to_output_var([TargetExpr("temp"), js_string_literal(" Dwarfs")])
    sb_asm.append_line_start("return ").append_output_var_name().append_line_end(".toString();")
    sb_asm.pop_output_var()
    sb_asm.decrease_indent()
    sb_asm.append_line("}  // ", "the end")

    assert sb_asm.get_code() == "\n".join([
        "story.title = function(opt_data) {",
        "  var output = new soy.StringBuilder();",
        "  var temp = new soy.StringBuilder('Snow White and the ', opt_data.numDwarfs);",
        "  output.append(temp, ' Dwarfs');",
        "  return output.toString();",
        "}  // the end",
    ])
