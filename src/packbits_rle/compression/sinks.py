"""
Write sinks for the decode core.

The decoder never writes into a destination directly. It hands every decoded
run to a sink through :py:meth:`copy` (literal bytes) or :py:meth:`fill`
(repeated byte), after clamping the run to :py:attr:`room`. Swapping the sink
is what turns the plain decoder into the windowed one.
"""

from typing import Tuple

from attrs import define, field

from packbits_rle.validators import range_


@define
class BufferSink:
    """
    Sink writing every decoded byte into ``buffer``, from index 0.

    .. py:attribute:: buffer

        Writable flat ``B`` view of the destination.

    .. py:attribute:: written

        Number of bytes written so far.
    """

    buffer: memoryview
    written: int = 0

    @property
    def room(self) -> int:
        """Decoded bytes the sink can still take."""
        return len(self.buffer) - self.written

    def copy(self, data: memoryview) -> None:
        end = self.written + len(data)
        self.buffer[self.written : end] = data
        self.written = end

    def fill(self, value: int, count: int) -> None:
        end = self.written + count
        self.buffer[self.written : end] = bytes((value,)) * count
        self.written = end


@define
class WindowSink:
    """
    Sink keeping only the decoded bytes at logical offsets
    ``[start, start + len(buffer))``.

    Bytes before the window advance :py:attr:`position` and are dropped. The
    window's first byte lands at ``buffer[0]``.

    .. py:attribute:: buffer

        Writable flat ``B`` view sized to the window.

    .. py:attribute:: start

        Logical offset of the window in the decoded stream.

    .. py:attribute:: position

        Logical offset of the next decoded byte.
    """

    buffer: memoryview
    start: int = field(default=0, validator=range_(0))
    position: int = 0

    @property
    def stop(self) -> int:
        return self.start + len(self.buffer)

    @property
    def written(self) -> int:
        return min(max(self.position - self.start, 0), len(self.buffer))

    @property
    def room(self) -> int:
        """Decoded bytes left until the window is complete."""
        if not len(self.buffer):
            return 0
        return self.stop - self.position

    def copy(self, data: memoryview) -> None:
        count = len(data)
        lo, hi = self._overlap(count)
        if lo < hi:
            self.buffer[lo - self.start : hi - self.start] = data[
                lo - self.position : hi - self.position
            ]
        self.position += count

    def fill(self, value: int, count: int) -> None:
        lo, hi = self._overlap(count)
        if lo < hi:
            self.buffer[lo - self.start : hi - self.start] = bytes((value,)) * (hi - lo)
        self.position += count

    def _overlap(self, count: int) -> Tuple[int, int]:
        return max(self.position, self.start), min(self.position + count, self.stop)
