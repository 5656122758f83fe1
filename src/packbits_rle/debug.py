"""
Assorted debug utilities
"""

from typing import Any


def pprint(*args: Any, **kwargs: Any) -> None:
    """
    Pretty-print a Python object using ``IPython.lib.pretty.pprint``.
    Fallback to ``pprint.pprint`` if IPython is not available.
    """
    try:
        from IPython.lib.pretty import pprint
    except ImportError:
        from pprint import pprint
    pprint(*args, **kwargs)


def trimmed_repr(data: bytes, max_length: int = 16) -> str:
    """
    Return the repr of ``data``, cut after ``max_length`` bytes with the
    total size appended.
    """
    if len(data) <= max_length:
        return repr(data)
    return "%s...(%d bytes)" % (repr(data[:max_length]), len(data))
