#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

"""
String escape helpers shared by the JS and Python output strategies.

Both targets get single-quoted literals. These functions encode raw text to
the literal body only (without quotes) and keep the result pure ASCII.
"""


_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def encode_js_string_body(text: str) -> str:
    """
    Encode text into a JS single-quoted string-literal body.

    Non-ASCII code points use \\uXXXX escapes; code points outside the BMP
    are written as a UTF-16 surrogate pair.
    """
    parts: list[str] = []
    for ch in text:
        if ch in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[ch])
            continue
        cp = ord(ch)
        if 0x20 <= cp <= 0x7E:
            parts.append(ch)
        elif cp <= 0xFF:
            parts.append(f"\\x{cp:02x}")
        elif cp <= 0xFFFF:
            parts.append(f"\\u{cp:04x}")
        else:
            cp -= 0x10000
            high = 0xD800 + (cp >> 10)
            low = 0xDC00 + (cp & 0x3FF)
            parts.append(f"\\u{high:04x}\\u{low:04x}")
    return "".join(parts)


def encode_py_string_body(text: str) -> str:
    """
    Encode text into a Python single-quoted string-literal body.
    """
    parts: list[str] = []
    for ch in text:
        if ch in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[ch])
            continue
        cp = ord(ch)
        if 0x20 <= cp <= 0x7E:
            parts.append(ch)
        elif cp <= 0xFF:
            parts.append(f"\\x{cp:02x}")
        elif cp <= 0xFFFF:
            parts.append(f"\\u{cp:04x}")
        else:
            parts.append(f"\\U{cp:08x}")
    return "".join(parts)
