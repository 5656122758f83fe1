"""
Buffer coercion shared by the encoder and decoders.

Sources and destinations are accepted as any object supporting the buffer
protocol and are viewed as flat unsigned bytes. The views alias the caller's
memory, so nothing here copies data.
"""

from typing import Any, Optional


def as_source(source: Any) -> memoryview:
    """
    Return a flat ``B`` format view of ``source``.

    :raise TypeError: if ``source`` is not a contiguous buffer.
    """
    view = memoryview(source)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def as_destination(dest: Any, dest_limit: Optional[int] = None) -> memoryview:
    """
    Return a writable flat view of the first ``dest_limit`` bytes of ``dest``.

    :param dest: writable buffer, e.g. a `bytearray` or numpy array.
    :param dest_limit: number of bytes that may be written, defaults to the
        size of ``dest``.
    :raise TypeError: if ``dest`` is read-only.
    :raise ValueError: if ``dest_limit`` does not fit the buffer.
    """
    view = as_source(dest)
    if view.readonly:
        raise TypeError("Destination buffer is read-only")
    if dest_limit is None:
        return view
    if not 0 <= dest_limit <= len(view):
        raise ValueError(
            "Invalid dest_limit %d for a buffer of %d bytes" % (dest_limit, len(view))
        )
    return view[:dest_limit]
