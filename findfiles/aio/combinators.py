"""Async lazy sequence combinators.

Counterparts of findfiles.sync.combinators with identical ordering and
error semantics. Inputs may be sync or async iterables, and mapping
functions and predicates may be plain callables or coroutine functions:
any awaitable they return is awaited before it is used.
"""

import inspect
from collections.abc import AsyncIterable
from typing import Any, AsyncIterator, Callable, Iterable, List, Optional, TypeVar, Union

from .._common.errors import ConflictError
from .._common.sequences import MISSING, is_async_expandable, is_expandable
from .matchers import conjunction

T = TypeVar('T')
AnyIterable = Union[Iterable[T], AsyncIterable]


async def _from_sync(iterable: Iterable[T]) -> AsyncIterator[T]:
    for element in iterable:
        yield element


def aiterate(iterable: AnyIterable) -> AsyncIterator:
    """Return an async iterator over a sync or async iterable."""
    if isinstance(iterable, AsyncIterable):
        return iterable.__aiter__()
    return _from_sync(iterable)


async def resolve(value: Any) -> Any:
    """Await a value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def _close(iterator: AsyncIterator) -> None:
    aclose = getattr(iterator, 'aclose', None)
    if aclose is not None:
        await aclose()


async def simple_map(iterable: AnyIterable, function: Callable[[Any], Any]) -> AsyncIterator[Any]:
    """Map each element to zero or one element; a None result is skipped."""
    async for element in aiterate(iterable):
        mapped = await resolve(function(element))
        if mapped is not None:
            yield mapped


async def multi_map(iterable: AnyIterable, function: Callable[[Any], Any]) -> AsyncIterator[Any]:
    """Map each element to zero, one or many elements.

    Sync and async iterable results are flattened in order; strings and
    bytes are single values. A None result produces nothing.
    """
    async for element in aiterate(iterable):
        mapped = await resolve(function(element))
        if mapped is None:
            continue
        if is_async_expandable(mapped):
            async for item in mapped:
                yield item
        elif is_expandable(mapped):
            for item in mapped:
                yield item
        else:
            yield mapped


async def filter_elements(iterable: AnyIterable, *predicates: Callable[[Any], Any]) -> AsyncIterator[Any]:
    """Yield the elements that pass every predicate.

    With no predicates nothing is yielded and the input is never pulled.
    """
    if not predicates:
        return
    matches = conjunction(*predicates)
    async for element in aiterate(iterable):
        if await matches(element):
            yield element


async def concatenate(*iterables: AnyIterable) -> AsyncIterator[Any]:
    """Yield every element of each iterable in turn, exhausting one before the next."""
    for iterable in iterables:
        async for element in aiterate(iterable):
            yield element


async def first_element(iterable: AnyIterable) -> Optional[Any]:
    """Return the first element, or None if the sequence is empty.

    The underlying async iterator is closed once the element is found.
    """
    iterator = aiterate(iterable)
    try:
        async for element in iterator:
            return element
        return None
    finally:
        await _close(iterator)


async def only_element(iterable: AnyIterable) -> Optional[Any]:
    """Return the only element of a sequence, or None if it is empty.

    Raises:
        ConflictError: As soon as a second element is produced
    """
    iterator = aiterate(iterable)
    retained = MISSING
    try:
        async for element in iterator:
            if retained is not MISSING:
                raise ConflictError(retained, element)
            retained = element
    finally:
        await _close(iterator)
    return None if retained is MISSING else retained


async def all_elements(iterable: AnyIterable) -> List[Any]:
    """Materialise a finite sequence into a list."""
    return [element async for element in aiterate(iterable)]
