"""
Source modes for the decoders.

A source mode tells the decoder how much of the source buffer it may read.
:py:class:`Bounded` caps the read at a byte count, while
:py:data:`FILL_DESTINATION` reads as much as is needed to fill the
destination and is used for unpacking a stream piecewise with
:py:func:`~packbits_rle.compression.decoder.unpack_chunk`.
"""

from typing import Optional, Union

from attrs import define, field

from packbits_rle.validators import range_


@define(frozen=True)
class Bounded:
    """
    Read at most ``count`` source bytes.

    .. py:attribute:: count

        Number of source bytes available to the decoder. Counts beyond the
        end of the source object are clamped to its length.
    """

    count: int = field(validator=range_(0))

    def end(self, length: int) -> int:
        return min(self.count, length)


@define(frozen=True)
class FillDestination:
    """
    Read as many source bytes as it takes to fill the destination.

    Use the :py:data:`FILL_DESTINATION` instance.
    """

    def end(self, length: int) -> int:
        return length


FILL_DESTINATION = FillDestination()

SourceMode = Union[Bounded, FillDestination]


def source_end(mode: Optional[SourceMode], length: int) -> int:
    """Index one past the last source byte the decoder may read."""
    if mode is None:
        return length
    if not isinstance(mode, (Bounded, FillDestination)):
        raise TypeError(
            "Expected Bounded or FillDestination, got %s" % type(mode).__name__
        )
    return mode.end(length)
