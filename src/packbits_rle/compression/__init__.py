"""
PackBits run-length codec.

This subpackage holds the encoder and decoders. PackBits, the scheme MacPaint
and TIFF use, packs a byte stream into chunks that each start with a header
byte:

- **0 to 127**: ``header + 1`` literal bytes follow.
- **129 to 255**: the next byte is repeated ``257 - header`` times.
- **128**: no operation, no payload.

There is no stream header, footer or checksum.

Two layers of API are provided. The fixed-buffer functions write into a
destination the caller allocated and never grow it:

- :py:func:`pack_into`: pack, or return :py:data:`PACK_FAILED` when the
  destination is too small.
- :py:func:`unpack_into`: unpack, stopping quietly when either buffer runs
  out.
- :py:func:`unpack_chunk`: unpack a stream piecewise.
- :py:func:`unpack_window_into`: unpack a window of the decoded stream.

The functions below allocate their result:

- :py:func:`encode`: pack into new bytes.
- :py:func:`decode`: unpack into new bytes.
- :py:func:`decode_window`: unpack a window into new bytes.
- :py:func:`unpacked_size`: decoded size of a stream.

Example usage::

    from packbits_rle.compression import decode, decode_window, encode

    packed, ok = encode(b'\\x00' * 100 + b'\\xff' * 50)
    assert ok and packed == b'\\x9d\\x00\\xcf\\xff'
    assert decode(packed) == b'\\x00' * 100 + b'\\xff' * 50
    assert decode_window(packed, 98, 4) == b'\\x00\\x00\\xff\\xff'

Performance notes:

- Runs are best for data with large uniform areas such as low-colour
  graphics.
- Worst case, the packed stream grows by one byte every 128 bytes.
- The windowed decoder still walks every chunk before the window; it saves
  memory, not time.
"""

from typing import Any, Optional, Tuple

from packbits_rle.compression.chunks import Chunk, iter_chunks
from packbits_rle.compression.decoder import (
    Progress,
    unpack_chunk,
    unpack_into,
    unpack_to_sink,
    unpack_window_into,
)
from packbits_rle.compression.encoder import PACK_FAILED, pack_into, worst_case_size
from packbits_rle.compression.modes import (
    FILL_DESTINATION,
    Bounded,
    FillDestination,
    SourceMode,
)

__all__ = [
    "FILL_DESTINATION",
    "PACK_FAILED",
    "Bounded",
    "Chunk",
    "FillDestination",
    "Progress",
    "SourceMode",
    "decode",
    "decode_window",
    "encode",
    "iter_chunks",
    "pack_into",
    "unpack_chunk",
    "unpack_into",
    "unpack_to_sink",
    "unpack_window_into",
    "unpacked_size",
    "worst_case_size",
]


def encode(source: Any, dest_capacity: Optional[int] = None) -> Tuple[bytes, bool]:
    """
    Pack ``source`` into new bytes.

    :param source: bytes-like data.
    :param dest_capacity: maximum packed size. Defaults to
        :py:func:`worst_case_size`, which always succeeds.
    :return: ``(packed, True)``, or ``(b'', False)`` if the packed stream
        would exceed ``dest_capacity``.
    """
    if dest_capacity is None:
        dest_capacity = worst_case_size(memoryview(source).nbytes)
    elif dest_capacity < 0:
        raise ValueError("Invalid dest_capacity %d" % dest_capacity)
    dest = bytearray(dest_capacity)
    written = pack_into(source, dest)
    if written is PACK_FAILED:
        return b"", False
    return bytes(dest[:written]), True


def unpacked_size(source: Any) -> int:
    """
    Number of bytes ``source`` decodes to, without decoding it.

    Damaged trailing chunks count the way :py:func:`decode` treats them.
    """
    return sum(chunk.length for chunk in iter_chunks(source))


def decode(source: Any, dest_capacity: Optional[int] = None) -> bytes:
    """
    Unpack ``source`` into new bytes.

    :param source: bytes-like packed stream.
    :param dest_capacity: maximum number of bytes to produce. Defaults to
        :py:func:`unpacked_size`.
    :return: decoded bytes, at most ``dest_capacity`` of them.
    """
    if dest_capacity is None:
        dest_capacity = unpacked_size(source)
    elif dest_capacity < 0:
        raise ValueError("Invalid dest_capacity %d" % dest_capacity)
    dest = bytearray(dest_capacity)
    written = unpack_into(source, dest)
    return bytes(dest[:written])


def decode_window(source: Any, window_start: int, window_length: int) -> bytes:
    """
    Unpack the decoded bytes ``[window_start, window_start + window_length)``.

    :param source: bytes-like packed stream.
    :param window_start: logical offset of the window.
    :param window_length: window size in bytes.
    :return: window contents, shorter than ``window_length`` when the
        decoded stream ends inside the window.
    """
    if window_length < 0:
        raise ValueError("Invalid window_length %d" % window_length)
    dest = bytearray(window_length)
    written = unpack_window_into(source, dest, window_start)
    return bytes(dest[:written])
