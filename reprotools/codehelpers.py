"""Helpers for generating C++ source: identifiers, data literals and string matchers."""

from __future__ import annotations

import os
import string
from collections.abc import Sequence
from pathlib import PurePath

from reprotools.cpp_tokeniser import NEW_LINE, is_reserved_keyword, write_escape_chars

_MAX_CHARS_ON_LINE = 250
_MAX_STRING_LITERAL_SIZE = 32768  # MS compilers can't handle big string literals
_UINT32_MASK = 0xFFFFFFFF
_IDENTIFIER_CHARS = frozenset(string.ascii_letters + "_ " + string.digits)
_BINARY_DATA_NAME_CHARS = frozenset(string.ascii_letters + "_" + string.digits)


def hex_string_8_digits(value: int) -> str:
    """Format ``value`` as a 32-bit lower-case hex string, zero-padded to 8 digits."""
    return format(value & _UINT32_MASK, "08x")


def _split_camel_case(s: str) -> str:
    """Insert a space wherever a lower-case letter is followed by an upper-case one."""
    pieces: list[str] = []
    previous = ""
    for ch in s:
        if (
            previous
            and ch.isalpha()
            and previous.isalpha()
            and ch.isupper()
            and not previous.isupper()
        ):
            pieces.append(" ")
        pieces.append(ch)
        previous = ch
    return "".join(pieces)


def make_valid_identifier(
    s: str,
    capitalise: bool = False,
    remove_colons: bool = True,
    allow_templates: bool = False,
) -> str:
    """Turn an arbitrary string into something usable as a C++ identifier."""
    if not s:
        return "unknown"

    if remove_colons:
        s = s.translate(str.maketrans(".,;:/@", "______"))
    else:
        s = s.translate(str.maketrans(".,;/@", "_____"))

    s = _split_camel_case(s)

    allowed = set(_IDENTIFIER_CHARS)
    if allow_templates:
        allowed.update("<>")
    if not remove_colons:
        allowed.add(":")

    retained = "".join(ch for ch in s if ch in allowed)
    words = [word.strip() for word in retained.split(" ")] if retained else []

    identifier = words[0] if words else ""
    if capitalise:
        identifier = identifier.lower()

    for word in words[1:]:
        if capitalise and len(word) > 1:
            identifier += word[0].upper() + word[1:].lower()
        else:
            identifier += word

    if identifier[:1].isdigit():
        identifier = "_" + identifier

    if is_reserved_keyword(identifier):
        identifier += "_"

    return identifier


def make_binary_data_identifier_name(file_name: str | os.PathLike[str]) -> str:
    """Return the identifier used for a resource file's data in BinaryData."""
    name = PurePath(file_name).name
    name = name.translate(str.maketrans(" .", "__"))
    name = "".join(ch for ch in name if ch in _BINARY_DATA_NAME_CHARS)
    return make_valid_identifier(name, False, True, False)


def _can_use_string_literal(data: bytes) -> bool:
    size = len(data)
    if size >= _MAX_STRING_LITERAL_SIZE:
        return False
    limit = size // 4
    escaped = 0
    for byte in data:
        if not (32 <= byte < 127 or byte in (9, 10, 13)):
            escaped += 1
            if escaped > limit:
                return False
    return True


def write_data_as_cpp_literal(
    data: bytes | bytearray,
    break_at_new_lines: bool = False,
    allow_string_breaks: bool = False,
) -> str:
    """Render ``data`` as a C++ initialiser: a string literal or a byte array."""
    data = bytes(data)

    if _can_use_string_literal(data):
        escaped = write_escape_chars(
            data,
            _MAX_CHARS_ON_LINE,
            break_at_new_lines,
            False,
            allow_string_breaks,
            False,
        )
        return '"' + escaped + '";'

    out = ["{ "]
    chars_on_line = 0
    for byte in data:
        out.append(f"{byte},")
        chars_on_line += len(str(byte)) + 1
        if chars_on_line >= _MAX_CHARS_ON_LINE:
            chars_on_line = 0
            out.append(NEW_LINE)
    out.append("0,0 };")
    return "".join(out)


def _hash_units(s: str) -> bytes:
    """UTF-8 bytes of ``s`` up to (not including) the first NUL."""
    encoded = s.encode("utf-8")
    nul = encoded.find(0)
    return encoded if nul < 0 else encoded[:nul]


def calculate_hash(s: str, hash_multiplier: int) -> int:
    """Hash the UTF-8 bytes of ``s`` as generated C++ code does, in 32 bits.

    Bytes are taken as signed chars, so bytes from 128 upwards wrap around.
    """
    value = 0
    for byte in _hash_units(s):
        unit = (byte - 256 if byte >= 128 else byte) & _UINT32_MASK
        value = (hash_multiplier * value + unit) & _UINT32_MASK
    return value


def find_best_hash_multiplier(strings: Sequence[str]) -> int:
    """Return the smallest odd multiplier from 31 upward giving no hash collisions."""
    keys = [_hash_units(s) for s in strings]
    if len(set(keys)) != len(keys):
        raise ValueError("strings must be distinct to find a collision-free hash")

    multiplier = 31
    while True:
        hashes = {calculate_hash(s, multiplier) for s in strings}
        if len(hashes) == len(strings):
            return multiplier
        multiplier = (multiplier + 2) & _UINT32_MASK


def create_string_matcher(
    utf8_pointer_variable: str,
    strings: Sequence[str],
    code_to_execute: Sequence[str],
    indent_level: int,
) -> str:
    """Generate C++ code that hashes a UTF-8 string and switches on the result."""
    if len(strings) != len(code_to_execute):
        raise ValueError("strings and code_to_execute must have the same length")

    indent = " " * indent_level
    multiplier = find_best_hash_multiplier(strings)
    signed_multiplier = multiplier - (1 << 32) if multiplier >= 1 << 31 else multiplier
    var = utf8_pointer_variable

    lines = [
        f"{indent}unsigned int hash = 0;",
        f"{indent}if ({var} != 0)",
        f"{indent}    while (*{var} != 0)",
        f"{indent}        hash = {signed_multiplier} * hash + (unsigned int) *{var}++;",
        "",
        f"{indent}switch (hash)",
        f"{indent}{{",
    ]
    for text, code in zip(strings, code_to_execute):
        case_hash = hex_string_8_digits(calculate_hash(text, multiplier))
        lines.append(f"{indent}    case 0x{case_hash}:  {code}")
    lines.append(f"{indent}    default: break;")
    lines.append(f"{indent}}}")
    lines.append("")

    return NEW_LINE.join(lines) + NEW_LINE