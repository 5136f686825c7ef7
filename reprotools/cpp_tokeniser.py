"""C++ keyword detection and escaping of raw bytes into C++ string literal text."""

from __future__ import annotations

NEW_LINE = "\r\n"

_KEYWORDS_BY_LENGTH: dict[int, frozenset[str]] = {
    2: frozenset({"do", "if", "or"}),
    3: frozenset({"and", "asm", "for", "int", "new", "not", "try", "xor"}),
    4: frozenset(
        {"auto", "bool", "case", "char", "else", "enum", "goto",
         "long", "this", "true", "void"}
    ),
    5: frozenset(
        {"bitor", "break", "catch", "class", "compl", "const", "false", "final",
         "float", "or_eq", "short", "throw", "union", "using", "while"}
    ),
    6: frozenset(
        {"and_eq", "bitand", "delete", "double", "export", "extern", "friend",
         "import", "inline", "module", "not_eq", "public", "return", "signed",
         "sizeof", "static", "struct", "switch", "typeid", "xor_eq"}
    ),
    7: frozenset(
        {"__cdecl", "_Pragma", "alignas", "alignof", "concept", "default",
         "mutable", "nullptr", "private", "typedef", "uint8_t", "virtual",
         "wchar_t"}
    ),
}

# Only consulted for tokens of length 8 to 16, so shorter entries never match.
_OTHER_KEYWORDS = frozenset(
    {"@class", "@dynamic", "@end", "@implementation", "@interface", "@public",
     "@private", "@protected", "@property", "@synthesize", "__fastcall", "__stdcall",
     "atomic_cancel", "atomic_commit", "atomic_noexcept", "char16_t", "char32_t",
     "co_await", "co_return", "co_yield", "const_cast", "constexpr", "continue",
     "decltype", "dynamic_cast", "explicit", "namespace", "noexcept", "operator",
     "override", "protected", "register", "reinterpret_cast", "requires",
     "static_assert", "static_cast", "synchronized", "template", "thread_local",
     "typename", "unsigned", "volatile"}
)

_SIMPLE_ESCAPES = {
    ord("\t"): "\\t",
    ord("\r"): "\\r",
    ord("\n"): "\\n",
    ord("\\"): "\\\\",
    ord('"'): '\\"',
}

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def is_reserved_keyword(token: str) -> bool:
    """Return True if ``token`` is a C++ (or Objective-C) reserved keyword."""
    length = len(token)
    words = _KEYWORDS_BY_LENGTH.get(length)
    if words is None:
        if length < 2 or length > 16:
            return False
        words = _OTHER_KEYWORDS
    return token in words


def write_escape_chars(
    data: bytes | bytearray | str,
    max_chars_on_line: int = 0,
    break_at_new_lines: bool = False,
    replace_single_quotes: bool = False,
    allow_string_breaks: bool = False,
    stop_at_nul: bool = False,
) -> str:
    """Escape ``data`` so that it can be placed between double quotes in C++ source.

    With ``stop_at_nul`` the data is treated as NUL-terminated: output stops at the
    first NUL byte and line breaks may be emitted after the final character.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)
    if stop_at_nul:
        nul = data.find(0)
        if nul >= 0:
            data = data[:nul]

    out: list[str] = []
    chars_on_line = 0
    last_was_hex_escape = False
    trigraph_detected = False
    last_index = len(data) - 1

    for i, c in enumerate(data):
        start_new_line = False
        simple = _SIMPLE_ESCAPES.get(c)

        if simple is not None:
            out.append(simple)
            trigraph_detected = False
            last_was_hex_escape = False
            chars_on_line += 2
            start_new_line = break_at_new_lines and c == ord("\n")
        elif c == ord("?"):
            if trigraph_detected:
                out.append("\\?")
                chars_on_line += 1
                trigraph_detected = False
            else:
                out.append("?")
                trigraph_detected = True
            last_was_hex_escape = False
            chars_on_line += 1
        elif c == 0:
            out.append("\\0")
            last_was_hex_escape = True
            trigraph_detected = False
            chars_on_line += 2
        elif c == ord("'") and replace_single_quotes:
            out.append("\\'")
            last_was_hex_escape = False
            trigraph_detected = False
            chars_on_line += 2
        else:
            printable = 32 <= c < 127
            if printable and not (last_was_hex_escape and c in _HEX_DIGITS):
                out.append(chr(c))
                chars_on_line += 1
            elif allow_string_breaks and last_was_hex_escape and printable:
                out.append('""' + chr(c))
                chars_on_line += 3
            else:
                out.append(("\\x0" if c < 16 else "\\x") + format(c, "x"))
                chars_on_line += 4
            last_was_hex_escape = not printable or (
                not allow_string_breaks and last_was_hex_escape and c in _HEX_DIGITS
            )
            trigraph_detected = False

        wants_break = start_new_line or (
            max_chars_on_line > 0 and chars_on_line >= max_chars_on_line
        )
        if wants_break and (stop_at_nul or i < last_index):
            chars_on_line = 0
            out.append('"' + NEW_LINE + '"')
            last_was_hex_escape = False

    return "".join(out)