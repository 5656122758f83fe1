"""
numpy adapters for the PackBits codec.

Arrays are packed as their raw bytes in C order. Decoders write straight into
a freshly allocated array through the buffer protocol, so no intermediate
`bytes` object is built.
"""

import logging
from typing import Any, Optional, Sequence, Union

import numpy as np

from packbits_rle.compression import (
    pack_into,
    unpack_into,
    unpack_window_into,
    unpacked_size,
    worst_case_size,
)

logger = logging.getLogger(__name__)


def pack_array(array: np.ndarray) -> bytes:
    """
    Pack the raw bytes of ``array``.

    :param array: array of any dtype, read in C order.
    :return: packed stream.
    """
    data = np.ascontiguousarray(array).reshape(-1).view(np.uint8)
    dest = np.empty(worst_case_size(data.size), dtype=np.uint8)
    written = pack_into(data, dest)
    assert written is not None
    return dest[:written].tobytes()


def unpack_array(
    source: Any,
    shape: Optional[Union[int, Sequence[int]]] = None,
    dtype: Any = np.uint8,
) -> np.ndarray:
    """
    Unpack ``source`` into a new array.

    :param source: bytes-like packed stream.
    :param shape: output shape. Without it, the result is 1-D and holds
        everything ``source`` decodes to.
    :param dtype: element type the decoded bytes are viewed as.
    :return: `numpy.ndarray`. Elements the stream does not reach stay zero.
    """
    if shape is None:
        result = np.zeros(unpacked_size(source), dtype=np.uint8)
        unpack_into(source, result)
        return result.view(dtype)

    dtype = np.dtype(dtype)
    size = int(np.prod(shape, dtype=np.int64)) * dtype.itemsize
    raw = np.zeros(size, dtype=np.uint8)
    written = unpack_into(source, raw)
    if written != size:
        logger.warning(
            "Decoded %d of %d bytes for shape %s, remaining elements are zero",
            written,
            size,
            shape,
        )
    return raw.view(dtype).reshape(shape)


def unpack_window_array(
    source: Any, window_start: int, window_length: int
) -> np.ndarray:
    """
    Unpack the decoded bytes ``[window_start, window_start + window_length)``
    into a 1-D `uint8` array.

    The array is cut to the bytes actually decoded.
    """
    if window_length < 0:
        raise ValueError("Invalid window_length %d" % window_length)
    result = np.empty(window_length, dtype=np.uint8)
    written = unpack_window_into(source, result, window_start)
    return result[:written]
