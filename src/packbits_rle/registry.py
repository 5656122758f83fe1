"""
Registry pattern utility for creating handler registries.

The decoder uses it to map each :py:class:`~packbits_rle.constants.ChunkKind`
to the function that interprets chunks of that kind.

Usage example::

    from packbits_rle.registry import new_registry

    HANDLERS, register = new_registry(attribute='kind')

    @register(ChunkKind.NOOP)
    def skip(source, pos, end, header, sink):
        return pos

    handler = HANDLERS[ChunkKind.NOOP]
"""

from typing import Any, Callable, Dict, Tuple, TypeVar, Union

T = TypeVar("T")


def new_registry(attribute: Union[str, None] = None) -> Tuple[Dict, Callable]:
    """
    Returns an empty dict and a @register decorator.

    :param attribute: Optional attribute name to set on registered objects.
                     The key will be stored as this attribute on the object.
    :return: Tuple of (registry_dict, register_decorator)
    """
    registry: Dict[Any, Callable] = {}

    def register(key: Any) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            if key in registry:
                raise ValueError("Duplicate registration for %r" % (key,))
            registry[key] = func
            if attribute:
                setattr(func, attribute, key)
            return func

        return decorator

    return registry, register
