"""
packbits-rle: PackBits run-length encoding for Python.

This package implements the PackBits scheme used by MacPaint and TIFF, a
byte-oriented run-length codec that packs runs of repeated bytes and keeps
differing bytes mostly as they are.

Basic usage::

    from packbits_rle import decode, encode

    packed, ok = encode(b'\\xaa\\xaa\\xaa\\xaa\\x01\\x02' + b'\\xaa' * 5)
    assert packed == b'\\xfd\\xaa\\x01\\x01\\x02\\xfc\\xaa'
    assert decode(packed) == b'\\xaa\\xaa\\xaa\\xaa\\x01\\x02' + b'\\xaa' * 5

Architecture:

- :py:mod:`packbits_rle.compression`: encoder, decoders and the allocating
  convenience functions (primary interface)
- :py:mod:`packbits_rle.numpy_io`: numpy array adapters
- :py:mod:`packbits_rle.constants`: format constants and header helpers
- :py:mod:`packbits_rle.debug`: helpers for inspecting streams

Memory-constrained callers should use the fixed-buffer functions
:py:func:`pack_into`, :py:func:`unpack_into` and
:py:func:`unpack_window_into`, which never allocate the output.
"""

from packbits_rle.compression import (
    FILL_DESTINATION,
    PACK_FAILED,
    Bounded,
    decode,
    decode_window,
    encode,
    iter_chunks,
    pack_into,
    unpack_chunk,
    unpack_into,
    unpack_window_into,
    unpacked_size,
    worst_case_size,
)
from packbits_rle.version import __version__

__all__ = [
    "FILL_DESTINATION",
    "PACK_FAILED",
    "Bounded",
    "__version__",
    "decode",
    "decode_window",
    "encode",
    "iter_chunks",
    "pack_into",
    "unpack_chunk",
    "unpack_into",
    "unpack_window_into",
    "unpacked_size",
    "worst_case_size",
]
