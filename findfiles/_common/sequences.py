"""Rules shared by the blocking and asyncio sequence combinators."""

from collections.abc import AsyncIterable, Iterable
from typing import Any

# Marks "no element seen yet", so that None can still be a real element.
MISSING = object()

# Never expanded by multi_map, even though they are iterable.
SCALAR_TYPES = (str, bytes, bytearray)


def is_expandable(value: Any) -> bool:
    """Whether multi_map should flatten a mapped value into several elements."""
    if isinstance(value, SCALAR_TYPES):
        return False
    return isinstance(value, Iterable)


def is_async_expandable(value: Any) -> bool:
    return isinstance(value, AsyncIterable)
