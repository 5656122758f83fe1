"""
Chunk-level view of a packed stream.

:py:func:`iter_chunks` splits a stream into :py:class:`Chunk` records without
decoding it. The records follow the decoder's rules for damaged input, so the
lengths always add up to what the decoder produces::

    from packbits_rle.compression.chunks import iter_chunks
    from packbits_rle.debug import pprint

    for chunk in iter_chunks(b'\\xfd\\xaa\\x01\\x01\\x02'):
        pprint(chunk)
"""

from typing import Any, Iterator

from attrs import define, field

from packbits_rle.compression.buffers import as_source
from packbits_rle.constants import (
    HEADER_KINDS,
    MAX_REPEAT,
    ChunkKind,
    decode_literal,
    decode_repeat,
)
from packbits_rle.debug import trimmed_repr
from packbits_rle.validators import in_, range_


@define(repr=False)
class Chunk:
    """
    One header byte and its payload.

    .. py:attribute:: kind

        See :py:class:`~packbits_rle.constants.ChunkKind`.

    .. py:attribute:: header

        Raw header byte.

    .. py:attribute:: offset

        Position of the header byte in the stream.

    .. py:attribute:: length

        Number of bytes the chunk decodes to.

    .. py:attribute:: payload

        Literal bytes, or the single repeated byte.

    .. py:attribute:: truncated

        Whether the stream ended before the declared payload.
    """

    kind: ChunkKind = field(converter=ChunkKind, validator=in_(ChunkKind))
    header: int = field(validator=range_(0, 255))
    offset: int = field(validator=range_(0))
    length: int = field(default=0, validator=range_(0, MAX_REPEAT))
    payload: bytes = b""
    truncated: bool = False

    def decoded(self) -> bytes:
        """Bytes this chunk decodes to."""
        if self.kind == ChunkKind.REPEAT:
            return self.payload * self.length
        return self.payload

    def __repr__(self) -> str:
        return "Chunk(kind=%s, header=0x%02x, offset=%d, length=%d, payload=%s%s)" % (
            self.kind.name,
            self.header,
            self.offset,
            self.length,
            trimmed_repr(self.payload),
            ", truncated=True" if self.truncated else "",
        )

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Chunk(...)")
            return
        p.text(repr(self))


def iter_chunks(source: Any) -> Iterator[Chunk]:
    """
    Iterate over the chunks of a packed stream.

    A literal chunk cut short by the end of the stream keeps the bytes that
    are there. A repeat header with no payload byte yields an empty chunk.
    Both are flagged ``truncated``.

    :param source: bytes-like packed stream.
    """
    src = as_source(source)
    end = len(src)
    pos = 0
    while pos < end:
        offset, header = pos, src[pos]
        kind = HEADER_KINDS[header]
        pos += 1
        if kind == ChunkKind.LITERAL:
            declared = decode_literal(header)
            payload = bytes(src[pos : pos + declared])
            pos += len(payload)
            yield Chunk(
                kind, header, offset, len(payload), payload, len(payload) < declared
            )
        elif kind == ChunkKind.REPEAT:
            payload = bytes(src[pos : pos + 1])
            pos += len(payload)
            length = decode_repeat(header) if payload else 0
            yield Chunk(kind, header, offset, length, payload, not payload)
        else:
            yield Chunk(kind, header, offset)
