"""
PackBits encoder.

The encoder makes a single greedy pass over the source. Bytes that have been
scanned but not written yet form the *pending region*. A run of identical
bytes at the start of the pending region is always packed as a repeat chunk,
but a run that would split a literal chunk is only packed once it reaches
:py:data:`~packbits_rle.constants.MIN_REPEAT` bytes: a repeat chunk costs two
bytes however long the run is, so shorter runs are cheaper left inside the
literal. This is a heuristic and not the smallest possible encoding, but it
is what other PackBits encoders of this family emit, byte for byte.

Data without any runs (an incrementing counter, say) costs one header byte
per 128 source bytes, see :py:func:`worst_case_size`.

Example::

    from packbits_rle.compression.encoder import pack_into, worst_case_size

    data = b'\\xaa' * 4 + b'\\x01\\x02' + b'\\xaa' * 5
    dest = bytearray(worst_case_size(len(data)))
    written = pack_into(data, dest)
    assert bytes(dest[:written]) == b'\\xfd\\xaa\\x01\\x01\\x02\\xfc\\xaa'
"""

import logging
from typing import Any, Optional

from packbits_rle.compression.buffers import as_destination, as_source
from packbits_rle.constants import (
    MAX_LITERAL,
    MAX_REPEAT,
    MIN_REPEAT,
    encode_literal,
    encode_repeat,
)

logger = logging.getLogger(__name__)

#: Returned by :py:func:`pack_into` when the destination is too small.
PACK_FAILED = None


def worst_case_size(length: int) -> int:
    """
    Destination size that guarantees :py:func:`pack_into` succeeds for a
    source of ``length`` bytes.
    """
    if length < 0:
        raise ValueError("Invalid length %d" % length)
    return length + (length + MAX_LITERAL - 1) // MAX_LITERAL


def pack_into(
    source: Any, dest: Any, dest_limit: Optional[int] = None
) -> Optional[int]:
    """
    Pack ``source`` into the pre-allocated buffer ``dest``.

    The destination is never resized. When the next chunk does not fit in
    ``dest_limit`` bytes, packing stops and :py:data:`PACK_FAILED` is
    returned; the destination then holds an incomplete stream which must be
    discarded. Calls writing into the same destination concurrently are not
    supported.

    :param source: bytes-like data to pack.
    :param dest: writable buffer receiving the packed stream.
    :param dest_limit: number of bytes of ``dest`` that may be used, defaults
        to the whole buffer.
    :return: number of bytes written, or :py:data:`PACK_FAILED`.
    """
    src = as_source(source)
    out = as_destination(dest, dest_limit)
    length = len(src)
    limit = len(out)
    if length == 0:
        return 0

    written = 0
    in_run = False
    pending_start = 0  # Source index of the first pending byte
    pending = 1  # Bytes scanned but not yet written
    run_start = 0  # Offset into the pending region where a run could start
    last = src[0]

    for pos in range(1, length):
        current = src[pos]
        pending += 1
        if in_run:
            if current != last or pending > MAX_REPEAT:
                # End of run or maximum run length reached.
                if written + 2 > limit:
                    return _overflow(pos, written + 2, limit)
                out[written] = encode_repeat(pending - 1)
                out[written + 1] = last
                written += 2
                pending_start = pos
                pending = 1
                run_start = 0
                in_run = False
        elif pending > MAX_LITERAL:
            # Write out a full literal chunk, keeping the current byte.
            size = 1 + MAX_LITERAL
            if written + size > limit:
                return _overflow(pos, written + size, limit)
            out[written] = encode_literal(MAX_LITERAL)
            out[written + 1 : written + size] = src[
                pending_start : pending_start + MAX_LITERAL
            ]
            written += size
            pending_start += MAX_LITERAL
            pending -= MAX_LITERAL
            run_start = pending - 1
        elif current == last:
            if run_start == 0 or pending - run_start >= MIN_REPEAT:
                if run_start:
                    size = 1 + run_start
                    if written + size > limit:
                        return _overflow(pos, written + size, limit)
                    out[written] = encode_literal(run_start)
                    out[written + 1 : written + size] = src[
                        pending_start : pending_start + run_start
                    ]
                    written += size
                    pending_start += run_start
                pending -= run_start
                in_run = True
        else:
            run_start = pending - 1
        last = current

    if in_run:
        if written + 2 > limit:
            return _overflow(length, written + 2, limit)
        out[written] = encode_repeat(pending)
        out[written + 1] = last
        written += 2
    else:
        size = 1 + pending
        if written + size > limit:
            return _overflow(length, written + size, limit)
        out[written] = encode_literal(pending)
        out[written + 1 : written + size] = src[pending_start : pending_start + pending]
        written += size

    return written


def _overflow(pos: int, required: int, limit: int) -> None:
    logger.debug(
        "pack failed at source offset %d: %d bytes required, limit is %d",
        pos,
        required,
        limit,
    )
    return PACK_FAILED
