import logging

import pytest

from packbits_rle.compression import (
    decode,
    encode,
    unpacked_size,
    worst_case_size,
)

from ..utils import RAW_IMAGE_3x3_8bit, SAMPLE, SAMPLE_PACKED, make_sample

logger = logging.getLogger(__name__)


def test_empty() -> None:
    assert encode(b"") == (b"", True)
    assert decode(b"") == b""
    assert unpacked_size(b"") == 0


def test_sample() -> None:
    assert encode(SAMPLE) == (SAMPLE_PACKED, True)
    assert decode(SAMPLE_PACKED) == SAMPLE


@pytest.mark.parametrize(
    "data",
    [
        b"\x00",
        RAW_IMAGE_3x3_8bit,
        bytes(range(256)),
        bytes(range(256)) * 3,
        b"\x00" * 1000,
        b"\x01\x02" * 300,
    ],
)
def test_encode_decode(data: bytes) -> None:
    packed, ok = encode(data)
    assert ok
    assert len(packed) <= worst_case_size(len(data))
    assert decode(packed) == data


@pytest.mark.parametrize("length", [1, 2, 3, 127, 128, 129, 255, 256, 257, 5000])
def test_encode_decode_random(length: int) -> None:
    data = make_sample(length, seed=length)
    packed, ok = encode(data)
    assert ok
    assert len(packed) <= length + (length + 127) // 128
    assert unpacked_size(packed) == length
    assert decode(packed) == data


@pytest.mark.slow
def test_encode_decode_max_length() -> None:
    data = make_sample(0xFFFF, seed=0xFFFF)
    packed, ok = encode(data, worst_case_size(len(data)))
    assert ok
    assert decode(packed) == data


@pytest.mark.parametrize("data", [b"\x00", SAMPLE, bytes(range(10))])
def test_encode_zero_capacity(data: bytes) -> None:
    assert encode(data, 0) == (b"", False)


@pytest.mark.parametrize(
    "capacity, expected",
    [(6, (b"", False)), (7, (SAMPLE_PACKED, True)), (100, (SAMPLE_PACKED, True))],
)
def test_encode_capacity(capacity: int, expected: tuple) -> None:
    assert encode(SAMPLE, capacity) == expected


def test_encode_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        encode(SAMPLE, -1)
    with pytest.raises(ValueError):
        decode(SAMPLE_PACKED, -1)


@pytest.mark.parametrize("capacity", [0, 1, 5, 11, 20])
def test_decode_capacity(capacity: int) -> None:
    assert decode(SAMPLE_PACKED, capacity) == SAMPLE[:capacity]


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x80\x80", 0),
        (b"\x03\x01\x02", 2),
        (b"\x00\x07\xfd", 1),
        (b"\x81\x00\x81", 128),
        (SAMPLE_PACKED, len(SAMPLE)),
    ],
)
def test_unpacked_size(data: bytes, expected: int) -> None:
    assert unpacked_size(data) == expected
    assert len(decode(data)) == expected
