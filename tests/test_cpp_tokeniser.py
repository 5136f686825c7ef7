import pytest

from reprotools.cpp_tokeniser import NEW_LINE, is_reserved_keyword, write_escape_chars


@pytest.mark.parametrize(
    "token",
    ["do", "for", "void", "class", "return", "nullptr", "namespace",
     "reinterpret_cast", "thread_local", "@interface"],
)
def test_reserved_keywords_are_detected(token):
    assert is_reserved_keyword(token) is True


@pytest.mark.parametrize(
    "token", ["", "x", "foo", "Class", "binaryData", "a_very_long_identifier_name"]
)
def test_non_keywords_are_rejected(token):
    assert is_reserved_keyword(token) is False


def test_short_entries_of_other_list_never_match():
    # "@end" sits in the long-keyword list, which is only searched for 8..16 chars.
    assert is_reserved_keyword("@end") is False
    assert is_reserved_keyword("@dynamic") is True


def test_plain_text_passes_through_unchanged():
    text = "Hello world, this is plain ASCII 123"
    assert write_escape_chars(text.encode()) == text


@pytest.mark.parametrize(
    "raw, escaped",
    [(b"\t", "\\t"), (b"\r", "\\r"), (b"\n", "\\n"), (b"\\", "\\\\"), (b'"', '\\"')],
)
def test_simple_escapes(raw, escaped):
    assert write_escape_chars(raw) == escaped


def test_trigraph_sequence_is_broken():
    assert write_escape_chars(b"??") == "?\\?"
    assert write_escape_chars(b"?") == "?"


def test_single_quotes_only_escaped_on_request():
    assert write_escape_chars(b"'") == "'"
    assert write_escape_chars(b"'", replace_single_quotes=True) == "\\'"


def test_hex_escape_followed_by_hex_digit():
    escaped = write_escape_chars(b"\x01a")
    assert escaped.startswith("\\x0")
    # The hex digit after a hex escape must itself be escaped.
    assert "a" not in escaped.replace("\\x", "")[1:] or escaped.count("\\x") == 2
    assert escaped.count("\\x") == 2
    broken = write_escape_chars(b"\x01a", allow_string_breaks=True)
    assert broken.endswith('""a')
    assert broken.count("\\x") == 1


def test_break_at_new_lines():
    result = write_escape_chars(b"a\nb", break_at_new_lines=True)
    assert result == "a\\n" + '"' + NEW_LINE + '"' + "b"
    # No break is emitted after the final byte.
    assert write_escape_chars(b"a\n", break_at_new_lines=True) == "a\\n"


def test_max_chars_on_line_splits_output():
    result = write_escape_chars(b"abcdef", max_chars_on_line=3)
    pieces = result.split('"' + NEW_LINE + '"')
    assert pieces == ["abc", "def"]
    assert "".join(pieces) == "abcdef"


def test_str_input_is_encoded_as_utf8():
    assert write_escape_chars("plain") == write_escape_chars(b"plain")