"""
PackBits decoders.

All decoders share one loop, :py:func:`unpack_to_sink`: it reads a header
byte, looks up the handler registered for its
:py:class:`~packbits_rle.constants.ChunkKind` and lets it move the run into a
sink (see :py:mod:`packbits_rle.compression.sinks`). Decoding never fails on
its input. It stops when either the source or the sink runs out, runs that
would overrun a buffer are cut short, and a repeat header missing its payload
byte is dropped.

The public entry points are:

- :py:func:`unpack_into`: decode into a fixed destination buffer.
- :py:func:`unpack_chunk`: fill a destination and report how much source was
  used, for unpacking a stream piece by piece.
- :py:func:`unpack_window_into`: keep only a window of the decoded stream.

The functions are stateless. Concurrent calls are fine as long as they do not
share a destination.
"""

import logging
from typing import Any, Optional, Union

from attrs import define

from packbits_rle.compression.buffers import as_destination, as_source
from packbits_rle.compression.modes import (
    FILL_DESTINATION,
    FillDestination,
    SourceMode,
    source_end,
)
from packbits_rle.compression.sinks import BufferSink, WindowSink
from packbits_rle.constants import (
    HEADER_KINDS,
    ChunkKind,
    decode_literal,
    decode_repeat,
)
from packbits_rle.registry import new_registry

logger = logging.getLogger(__name__)

Sink = Union[BufferSink, WindowSink]

HANDLERS, register = new_registry(attribute="kind")


@define(frozen=True)
class Progress:
    """
    Outcome of a decode.

    .. py:attribute:: written

        Bytes stored in the destination.

    .. py:attribute:: consumed

        Source bytes read, header bytes included.
    """

    written: int
    consumed: int


@register(ChunkKind.LITERAL)
def _unpack_literal(
    source: memoryview, pos: int, end: int, header: int, sink: Sink
) -> int:
    declared = decode_literal(header)
    count = min(declared, end - pos, sink.room)
    if count < declared and count == end - pos:
        logger.debug(
            "truncated literal chunk at offset %d: %d of %d bytes",
            pos - 1,
            count,
            declared,
        )
    sink.copy(source[pos : pos + count])
    return pos + count


@register(ChunkKind.REPEAT)
def _unpack_repeat(
    source: memoryview, pos: int, end: int, header: int, sink: Sink
) -> int:
    if pos >= end:
        logger.debug("dropped repeat chunk without payload at offset %d", pos - 1)
        return pos
    sink.fill(source[pos], min(decode_repeat(header), sink.room))
    return pos + 1


@register(ChunkKind.NOOP)
def _unpack_noop(
    source: memoryview, pos: int, end: int, header: int, sink: Sink
) -> int:
    return pos


def unpack_to_sink(
    source: Any, sink: Sink, mode: Optional[SourceMode] = None
) -> Progress:
    """
    Decode ``source`` into ``sink`` until either one is exhausted.

    :param source: bytes-like packed stream.
    :param sink: :py:class:`~packbits_rle.compression.sinks.BufferSink` or
        :py:class:`~packbits_rle.compression.sinks.WindowSink`.
    :param mode: source mode, defaults to the whole source.
    :return: :py:class:`Progress`.
    """
    src = as_source(source)
    end = source_end(mode, len(src))
    pos = 0
    while pos < end and sink.room > 0:
        header = src[pos]
        pos = HANDLERS[HEADER_KINDS[header]](src, pos + 1, end, header, sink)

    if pos < end and not isinstance(mode, FillDestination):
        logger.debug("destination full with %d source bytes left", end - pos)
    return Progress(written=sink.written, consumed=pos)


def unpack_into(
    source: Any,
    dest: Any,
    mode: Optional[SourceMode] = None,
    dest_limit: Optional[int] = None,
) -> int:
    """
    Unpack ``source`` into the pre-allocated buffer ``dest``.

    :param source: bytes-like packed stream.
    :param dest: writable buffer.
    :param mode: :py:class:`~packbits_rle.compression.modes.Bounded` to read
        only part of ``source``. Defaults to all of it.
    :param dest_limit: number of bytes of ``dest`` that may be used, defaults
        to the whole buffer.
    :return: number of bytes written, never more than ``dest_limit``.
    """
    sink = BufferSink(as_destination(dest, dest_limit))
    return unpack_to_sink(source, sink, mode).written


def unpack_chunk(source: Any, dest: Any, dest_limit: Optional[int] = None) -> int:
    """
    Fill ``dest`` from ``source`` and return the number of source bytes used.

    Call it again with the source advanced by the returned count to unpack
    the next piece. Pieces only line up with the stream when the destination
    size is a multiple of the size the data was packed in, otherwise a run
    straddling two pieces is cut.

    :param source: bytes-like packed stream.
    :param dest: writable buffer.
    :param dest_limit: number of bytes of ``dest`` to fill.
    :return: number of source bytes consumed.
    """
    sink = BufferSink(as_destination(dest, dest_limit))
    return unpack_to_sink(source, sink, FILL_DESTINATION).consumed


def unpack_window_into(
    source: Any,
    dest: Any,
    window_start: int,
    mode: Optional[SourceMode] = None,
    dest_limit: Optional[int] = None,
) -> int:
    """
    Unpack the decoded bytes ``[window_start, window_start + dest_limit)``
    into ``dest``.

    Everything before the window is still decoded, then thrown away, so the
    destination only needs to be as large as the window. The first window
    byte is written to ``dest[0]``.

    :param source: bytes-like packed stream.
    :param dest: writable buffer sized for the window.
    :param window_start: logical offset of the window in the decoded stream.
    :param mode: source mode, defaults to the whole source.
    :param dest_limit: window length, defaults to the size of ``dest``.
    :return: number of bytes written. Fewer than ``dest_limit`` when the
        decoded stream ends inside the window.
    """
    sink = WindowSink(as_destination(dest, dest_limit), window_start)
    return unpack_to_sink(source, sink, mode).written
