import io

import pytest

from reprotools.filehelpers import (
    calculate_file_hash_code,
    calculate_memory_hash_code,
    calculate_stream_hash_code,
    overwrite_file_with_new_data_if_different,
)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def test_empty_data_hashes_to_zero():
    assert calculate_memory_hash_code(b"") == 0


def test_single_byte_hash_is_byte_value():
    assert calculate_memory_hash_code(b"\x05") == 5


def test_hash_depends_on_order():
    assert calculate_memory_hash_code(b"ab") != calculate_memory_hash_code(b"ba")


def test_hash_stays_in_signed_64_bit_range():
    value = calculate_memory_hash_code(bytes(range(256)) * 20)
    assert INT64_MIN <= value <= INT64_MAX


@pytest.mark.parametrize("size", [0, 1, 4095, 4096, 4097, 10000])
def test_stream_hash_matches_memory_hash(size):
    data = bytes((i * 7) % 256 for i in range(size))
    assert calculate_stream_hash_code(io.BytesIO(data)) == calculate_memory_hash_code(data)


def test_file_hash_matches_memory_hash(tmp_path):
    data = b"hello world\n" * 500
    path = tmp_path / "f.bin"
    path.write_bytes(data)
    assert calculate_file_hash_code(path) == calculate_memory_hash_code(data)


def test_missing_file_hashes_to_zero(tmp_path):
    assert calculate_file_hash_code(tmp_path / "missing.bin") == 0


def test_overwrite_creates_file_and_parents(tmp_path):
    path = tmp_path / "a" / "b" / "out.cpp"
    assert overwrite_file_with_new_data_if_different(path, b"content") is True
    assert path.read_bytes() == b"content"


def test_overwrite_same_content_leaves_file_untouched(tmp_path):
    path = tmp_path / "out.cpp"
    path.write_bytes(b"same")
    before = path.stat().st_mtime_ns
    assert overwrite_file_with_new_data_if_different(path, b"same") is False
    assert path.stat().st_mtime_ns == before
    assert path.read_bytes() == b"same"


def test_overwrite_replaces_different_content(tmp_path):
    path = tmp_path / "out.cpp"
    path.write_bytes(b"old content that is longer")
    assert overwrite_file_with_new_data_if_different(path, b"new") is True
    assert path.read_bytes() == b"new"


def test_overwrite_same_size_different_content(tmp_path):
    path = tmp_path / "out.cpp"
    path.write_bytes(b"abcd")
    assert overwrite_file_with_new_data_if_different(path, b"dcba") is True
    assert path.read_bytes() == b"dcba"


def test_empty_data_for_missing_file_writes_nothing(tmp_path):
    path = tmp_path / "empty.cpp"
    assert overwrite_file_with_new_data_if_different(path, b"") is False
    assert not path.exists()