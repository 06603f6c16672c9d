#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from tplasm_string_escape import encode_js_string_body, encode_py_string_body


def test_encode_js_string_body_ascii_passthrough():
    assert encode_js_string_body("abcXYZ09 <b>") == "abcXYZ09 <b>"


def test_encode_js_string_body_escapes_controls_and_quotes():
    assert encode_js_string_body("a\n\t\\'b\"") == "a\\n\\t\\\\\\'b\""


def test_encode_js_string_body_non_ascii():
    assert encode_js_string_body("\x00\x7f\u00e9\u20ac") == "\\x00\\x7f\\xe9\\u20ac"


def test_encode_js_string_body_astral_uses_surrogate_pair():
    assert encode_js_string_body("\U0001F600") == "\\ud83d\\ude00"


def test_encode_py_string_body_escapes():
    assert encode_py_string_body("it's\r\n") == "it\\'s\\r\\n"


def test_encode_py_string_body_non_ascii():
    assert encode_py_string_body("\u20ac\U0001F600") == "\\u20ac\\U0001f600"
