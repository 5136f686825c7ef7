# reprotools

Small building blocks for tools that generate C++ build inputs.

## Modules

- `reprotools.cpp_tokeniser`
  - `is_reserved_keyword(token)` reports whether a token is a C++ or Objective-C
    reserved word.
  - `write_escape_chars(data, ...)` escapes bytes, or a string encoded as UTF-8,
    so the result can go between double quotes in C++ source. It handles trigraph
    `??` sequences and hex escapes. It can also break long lines, at a maximum
    line length or after newlines.
- `reprotools.codehelpers`
  - `make_valid_identifier` and `make_binary_data_identifier_name` turn
    arbitrary names into valid C++ identifiers.
  - `write_data_as_cpp_literal` renders bytes as a C++ initialiser. Small data
    that is mostly printable becomes a string literal. Anything else becomes a
    `{ ...,0,0 }` byte array.
  - `create_string_matcher` emits C++ code that hashes a UTF-8 string and
    `switch`es on the result.
  - `calculate_hash` computes the 32-bit hash used by that code.
  - `find_best_hash_multiplier` picks the smallest odd multiplier, starting at
    31, that gives no collisions. It raises `ValueError` for duplicate strings.
  - `hex_string_8_digits` formats a value as 8 lower-case hex digits.
- `reprotools.filehelpers`
  - `calculate_memory_hash_code`, `calculate_stream_hash_code` and
    `calculate_file_hash_code` compute signed 64-bit content hashes of bytes,
    binary streams and files. For a file that cannot be opened, the hash is 0.
  - `overwrite_file_with_new_data_if_different(path, data)` writes the file only
    when its contents would change, and creates missing parent directories. It
    returns `True` if it wrote the file and `False` if it left the file as it
    was. It raises `OSError` if the write fails.
- `reprotools.project`
  - `Project(output_dir, project_uid)` gives the paths of the generated
    `BinaryData.h` through `binary_data_header_file()`.
  - `binary_data_cpp_file(index)` gives the source-file paths:
    `BinaryData.cpp` for index 0, `BinaryData2.cpp` for index 1, and so on.
- `reprotools.plist_merger`
  - `merge_plists(first, second)` adds the entries of the second property list
    to the `<dict>` of the first. It skips keys that the first list already has,
    and returns the merged document without an XML header.
  - It raises `PlistError`, a `ValueError`, in these cases:
    - an input is malformed;
    - an input lacks a `<plist>` or `<dict>` element;
    - a `<key>` entry is malformed;
    - a key has no value;
    - the first document repeats a key.

## Install

```
pip install .
```

## Examples

```python
from reprotools.codehelpers import make_binary_data_identifier_name, write_data_as_cpp_literal

make_binary_data_identifier_name("logo image.png")   # "logo_image_png"
write_data_as_cpp_literal(b"hello\n", False, True)    # '"hello\\n";'
```

```python
from reprotools.plist_merger import merge_plists

merged = merge_plists(
    "<plist><dict><key>A</key><string>1</string></dict></plist>",
    "<plist><dict><key>A</key><string>2</string><key>B</key><true/></dict></plist>",
)
# The result keeps A = 1 from the first document and adds B.
```

## Command line

```
plist-merger '<first plist content>' '<second plist content>'
```

The command prints the merged plist to standard output. It writes a message to
standard error and exits with status 1 in two cases: it is not given exactly two
arguments, or an input is invalid.

## What it does not do

The package provides the pieces only. It has no command that writes a complete
set of `BinaryData` header and source files from resource files. It does not
build application icons, and it does not produce CMake project files.