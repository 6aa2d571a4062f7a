import zlib

import pytest

from miku.checksum import crc32, crc32_update, fnv1a_64

SAMPLES = [b"", b"a", b"hello world", bytes(range(256)), b"\xff" * 1000]


def test_fnv_empty_is_offset_basis():
    assert fnv1a_64(b"") == 14695981039346656037


def test_fnv_single_byte_step():
    expected = ((14695981039346656037 ^ ord("a")) * 1099511628211) & 0xFFFFFFFFFFFFFFFF
    assert fnv1a_64(b"a") == expected


def test_fnv_str_matches_utf8_bytes():
    assert fnv1a_64("héllo") == fnv1a_64("héllo".encode("utf-8"))


def test_fnv_range_and_distinct():
    values = {fnv1a_64(s) for s in SAMPLES}
    assert len(values) == len(SAMPLES)
    assert all(0 <= v < 2**64 for v in values)


@pytest.mark.parametrize("data", SAMPLES)
def test_crc32_matches_standard(data):
    assert crc32(data) == zlib.crc32(data)


def test_crc32_empty_is_zero():
    assert crc32(b"") == 0


@pytest.mark.parametrize("split", [0, 1, 5, 11])
def test_crc32_update_is_incremental(split):
    data = b"hello world"
    partial = crc32(data[:split])
    assert crc32_update(partial, data[split:]) == crc32(data)


def test_crc32_accepts_bytearray_and_memoryview():
    data = b"payload"
    assert crc32(bytearray(data)) == crc32(data)
    assert crc32(memoryview(data)) == crc32(data)