import logging
import random
from typing import Iterator, List

logging.basicConfig(level=logging.DEBUG)

# b'\xaa' * 4, two literals, b'\xaa' * 5
SAMPLE = b"\xaa\xaa\xaa\xaa\x01\x02\xaa\xaa\xaa\xaa\xaa"
SAMPLE_PACKED = b"\xfd\xaa\x01\x01\x02\xfc\xaa"

# A single 3x3 8-bit plane.
RAW_IMAGE_3x3_8bit = b"\x00\x01\x02\x01\x01\x01\x01\x00\x00"


def make_sample(length: int, seed: int = 0) -> bytes:
    """Random data mixing runs of all lengths with noise."""
    rng = random.Random(seed)
    result = bytearray()
    while len(result) < length:
        if rng.random() < 0.5:
            result.extend(bytes((rng.randrange(256),)) * rng.randint(1, 300))
        else:
            result.extend(rng.randrange(256) for _ in range(rng.randint(1, 300)))
    return bytes(result[:length])


def reference_decode(data: bytes) -> bytes:
    """Straightforward decoder used to cross-check the codec."""
    decoded = bytearray()
    data_iter = iter(data)
    while True:
        header = next(data_iter, None)
        if header is None:
            break
        if header < 128:
            for _ in range(header + 1):
                value = next(data_iter, None)
                if value is None:
                    return bytes(decoded)
                decoded.append(value)
        elif header > 128:
            value = next(data_iter, None)
            if value is None:
                break
            decoded.extend([value] * (257 - header))
    return bytes(decoded)


def split_rows(data: bytes, row_size: int) -> List[bytes]:
    return [data[i : i + row_size] for i in range(0, len(data), row_size)]


def windows(size: int) -> Iterator[tuple]:
    for start in range(0, size + 3):
        for length in (0, 1, 2, 5, 127, 130):
            yield start, length
