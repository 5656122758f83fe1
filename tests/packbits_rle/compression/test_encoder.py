import array
import logging

import numpy as np
import pytest

from packbits_rle.compression.encoder import PACK_FAILED, pack_into, worst_case_size

from ..utils import RAW_IMAGE_3x3_8bit, SAMPLE, SAMPLE_PACKED, make_sample

logger = logging.getLogger(__name__)


def pack(data: bytes) -> bytes:
    dest = bytearray(worst_case_size(len(data)))
    written = pack_into(data, dest)
    assert written is not None
    return bytes(dest[:written])


def test_sample() -> None:
    assert pack(SAMPLE) == SAMPLE_PACKED


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", b""),
        (b"\x05", b"\x00\x05"),
        (b"\x05\x05", b"\xff\x05"),
        (b"\x01\x02", b"\x01\x01\x02"),
        # A run at the start of the pending bytes is taken even when short.
        (b"\x01\x01\x02", b"\xff\x01\x00\x02"),
        # Two equal bytes inside literal data stay literal.
        (b"\x01\x02\x02\x03", b"\x03\x01\x02\x02\x03"),
        # Three equal bytes break the literal chunk.
        (b"\x01\x02\x02\x02", b"\x00\x01\xfe\x02"),
        (b"\x01\x02\x02\x02\x03", b"\x00\x01\xfe\x02\x00\x03"),
        (b"\x07" * 128, b"\x81\x07"),
        (b"\x07" * 129, b"\x81\x07\x00\x07"),
        (b"\x07" * 130, b"\x81\x07\xff\x07"),
        (
            RAW_IMAGE_3x3_8bit,
            b"\x02\x00\x01\x02\xfd\x01\xff\x00",
        ),
    ],
)
def test_pack(data: bytes, expected: bytes) -> None:
    assert pack(data) == expected


def test_pack_literal_limit() -> None:
    data = bytes(range(256))
    packed = pack(data)
    assert packed == b"\x7f" + data[:128] + b"\x7f" + data[128:]


@pytest.mark.parametrize("length", [3, 4, 127, 128, 129, 130, 255, 256, 257, 1000])
def test_pack_runs(length: int) -> None:
    assert len(pack(b"\xee" * length)) == (length + 127) // 128 * 2


@pytest.mark.parametrize("length", [1, 2, 127, 128, 129, 300, 1024])
def test_pack_no_runs(length: int) -> None:
    data = bytes(i % 256 for i in range(length))
    assert len(pack(data)) == length + (length + 127) // 128


@pytest.mark.parametrize("length", [0, 1, 128, 129, 1000, 4096])
def test_pack_overhead(length: int) -> None:
    data = make_sample(length, seed=length)
    assert len(pack(data)) <= worst_case_size(length)


@pytest.mark.parametrize(
    "length, expected",
    [(0, 0), (1, 2), (127, 128), (128, 129), (129, 131), (0xFFFF, 0xFFFF + 512)],
)
def test_worst_case_size(length: int, expected: int) -> None:
    assert worst_case_size(length) == expected


def test_worst_case_size_negative() -> None:
    with pytest.raises(ValueError):
        worst_case_size(-1)


@pytest.mark.parametrize("data", [b"\x00", b"\x01\x01", SAMPLE, bytes(range(200))])
def test_pack_empty_destination(data: bytes) -> None:
    assert pack_into(data, bytearray()) is PACK_FAILED


def test_pack_empty_source_empty_destination() -> None:
    assert pack_into(b"", bytearray()) == 0


@pytest.mark.parametrize(
    "limit, expected", [(6, None), (7, len(SAMPLE_PACKED)), (8, len(SAMPLE_PACKED))]
)
def test_pack_dest_limit(limit: int, expected: int) -> None:
    dest = bytearray(32)
    assert pack_into(SAMPLE, dest, limit) == expected
    assert not any(dest[limit:])


@pytest.mark.parametrize("capacity", [0, 1, 128, 129])
def test_pack_literal_overflow(capacity: int) -> None:
    data = bytes(range(129))
    assert pack_into(data, bytearray(capacity)) is PACK_FAILED


def test_pack_buffer_types() -> None:
    dest = np.zeros(16, dtype=np.uint8)
    written = pack_into(array.array("B", SAMPLE), dest)
    assert dest[:written].tobytes() == SAMPLE_PACKED

    dest = bytearray(16)
    written = pack_into(memoryview(SAMPLE), memoryview(dest))
    assert bytes(dest[:written]) == SAMPLE_PACKED


def test_pack_readonly_destination() -> None:
    with pytest.raises(TypeError):
        pack_into(SAMPLE, bytes(16))


@pytest.mark.parametrize("limit", [-1, 17])
def test_pack_invalid_dest_limit(limit: int) -> None:
    with pytest.raises(ValueError):
        pack_into(SAMPLE, bytearray(16), limit)
