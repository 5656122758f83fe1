"""
Various constants for packbits_rle
"""

from enum import IntEnum

#: Shortest run worth breaking a literal chunk for.
MIN_REPEAT = 3

#: Longest run a single repeat chunk can describe.
MAX_REPEAT = 128

#: Longest literal chunk.
MAX_LITERAL = 128

#: Header byte of the no-operation chunk.
NOOP_HEADER = 128


class ChunkKind(IntEnum):
    """
    Kind of chunk announced by a header byte.

    .. py:attribute:: LITERAL

        Header 0 to 127, ``header + 1`` literal bytes follow.

    .. py:attribute:: REPEAT

        Header 129 to 255, ``257 - header`` copies of the next byte.

    .. py:attribute:: NOOP

        Header 128, no payload and no output.
    """

    LITERAL = 0
    REPEAT = 1
    NOOP = 2

    @staticmethod
    def classify(header: int) -> "ChunkKind":
        return HEADER_KINDS[header]


HEADER_KINDS = tuple(
    ChunkKind.LITERAL
    if header < NOOP_HEADER
    else ChunkKind.NOOP
    if header == NOOP_HEADER
    else ChunkKind.REPEAT
    for header in range(256)
)


def encode_literal(count: int) -> int:
    """Header byte for a literal chunk of ``count`` bytes (1 to 128)."""
    return count - 1


def encode_repeat(count: int) -> int:
    """Header byte for a repeat chunk of ``count`` bytes (2 to 128)."""
    return (257 - count) % 256


def decode_literal(header: int) -> int:
    return header + 1


def decode_repeat(header: int) -> int:
    return 257 - header
