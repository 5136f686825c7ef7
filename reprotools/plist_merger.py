"""Merge two property lists, keeping the first one's values for shared keys."""

from __future__ import annotations

import copy
import sys
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

from reprotools.cpp_tokeniser import NEW_LINE

_USAGE = "usage: PListMerger <first-plist-content> <second-plist-content>"
_LEGAL_PUNCTUATION = frozenset(" .,;:-()_+=?!$#@[]/|*%~{}'\\")


class PlistError(ValueError):
    """Raised when a plist given for merging is not of the expected shape."""


@dataclass
class _Element:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[_Node] = field(default_factory=list)

    def child_elements(self) -> Iterator[_Element]:
        return (child for child in self.children if isinstance(child, _Element))


_Node = Union[_Element, str]


def _is_significant(text: str | None) -> bool:
    return bool(text) and not text.isspace()


def _convert(element: ET.Element) -> _Element:
    node = _Element(element.tag, dict(element.attrib))
    if _is_significant(element.text):
        node.children.append(element.text)
    for sub in element:
        node.children.append(_convert(sub))
        if _is_significant(sub.tail):
            node.children.append(sub.tail)
    return node


def _parse(content: str) -> _Element | None:
    try:
        return _convert(ET.fromstring(content))
    except ET.ParseError:
        return None


def _find_dict(content: str, which: str) -> tuple[_Element, _Element]:
    plist = _parse(content)
    if plist is None or plist.tag != "plist":
        raise PlistError(f"Invalid {which} plist content, expected <plist> element")
    dict_element = next((c for c in plist.child_elements() if c.tag == "dict"), None)
    if dict_element is None:
        raise PlistError(f"Invalid {which} plist content, expected <dict> element")
    return plist, dict_element


def _key_value_pairs(dict_element: _Element, which: str) -> Iterator[tuple[str, _Node, _Node]]:
    """Yield (key text, key node, value node) for each entry of a <dict>."""
    nodes = iter(list(dict_element.children))
    for node in nodes:
        if not (
            isinstance(node, _Element)
            and node.tag == "key"
            and len(node.children) == 1
            and isinstance(node.children[0], str)
        ):
            raise PlistError(
                f"Invalid {which} plist content, expected <key> element with only "
                "one text child element"
            )
        key = node.children[0]
        value = next(nodes, None)
        yield key, node, value
        if value is None:
            raise PlistError(
                f'Invalid {which} plist content, missing value associated with key "{key}"'
            )


def _escape(text: str, in_attribute: bool) -> str:
    out: list[str] = []
    for ch in text:
        if ch.isascii() and ch.isalnum() or ch in _LEGAL_PUNCTUATION or ord(ch) >= 128:
            out.append(ch)
        elif ch == "&":
            out.append("&amp;")
        elif ch == '"':
            out.append("&quot;")
        elif ch == ">":
            out.append("&gt;")
        elif ch == "<":
            out.append("&lt;")
        elif ch in "\r\n" and not in_attribute:
            out.append(ch)
        else:
            out.append(f"&#{ord(ch)};")
    return "".join(out)


def _write(element: _Element, indent: int, out: list[str]) -> None:
    out.append(" " * indent + "<" + element.tag)
    for name, value in element.attributes.items():
        out.append(f' {name}="{_escape(value, True)}"')
    if not element.children:
        out.append("/>")
        return
    out.append(">")
    last_was_text = False
    for child in element.children:
        if isinstance(child, str):
            out.append(_escape(child, False))
            last_was_text = True
        else:
            if not last_was_text:
                out.append(NEW_LINE)
            _write(child, 0 if last_was_text else indent + 2, out)
            last_was_text = False
    if not last_was_text:
        out.append(NEW_LINE + " " * indent)
    out.append(f"</{element.tag}>")


def _to_document(element: _Element) -> str:
    out: list[str] = []
    _write(element, 0, out)
    out.append(NEW_LINE)
    return "".join(out)


def merge_plists(first: str, second: str) -> str:
    """Merge the ``second`` plist's entries into the ``first`` one.

    Entries whose key already appears in the first plist are skipped. Returns
    the merged document without an XML header; raises PlistError on bad input.
    """
    first_plist, first_dict = _find_dict(first, "first")

    keys_in_first: list[str] = []
    for key, _key_node, _value in _key_value_pairs(first_dict, "first"):
        if key in keys_in_first:
            raise PlistError(f'Invalid first plist content, duplicated key "{key}"')
        keys_in_first.append(key)

    _second_plist, second_dict = _find_dict(second, "second")

    for key, key_node, value in _key_value_pairs(second_dict, "second"):
        if key in keys_in_first:
            continue
        first_dict.children.append(copy.deepcopy(key_node))
        if value is not None:
            first_dict.children.append(copy.deepcopy(value))

    return _to_document(first_plist)


def main(argv: Sequence[str] | None = None) -> int:
    """Merge two plists given as arguments and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        merged = merge_plists(args[0], args[1])
    except PlistError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(merged)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())