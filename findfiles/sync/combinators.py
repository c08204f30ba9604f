"""Lazy sequence combinators (blocking form).

Every combinator returns a one-shot generator; nothing is read from the
input until the result is iterated. An exception from the input or from
a caller-supplied function ends the sequence at that point, after every
element produced before it has been delivered.

The asyncio counterparts in findfiles.aio.combinators have the same names
and produce the same elements in the same order.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from .._common.errors import ConflictError
from .._common.matchers import Matcher, conjunction
from .._common.sequences import MISSING, is_expandable

T = TypeVar('T')
U = TypeVar('U')


def simple_map(iterable: Iterable[T], function: Callable[[T], Optional[U]]) -> Iterator[U]:
    """Map each element to zero or one element; a None result is skipped."""
    for element in iterable:
        mapped = function(element)
        if mapped is not None:
            yield mapped


def multi_map(iterable: Iterable[T], function: Callable[[T], Any]) -> Iterator[Any]:
    """Map each element to zero, one or many elements.

    Iterable results are flattened in order. Strings and bytes are treated
    as single values, never expanded character by character. A None result
    produces nothing.
    """
    for element in iterable:
        mapped = function(element)
        if mapped is None:
            continue
        if is_expandable(mapped):
            yield from mapped
        else:
            yield mapped


def filter_elements(iterable: Iterable[T], *predicates: Matcher) -> Iterator[T]:
    """Yield the elements that pass every predicate.

    With no predicates nothing is yielded and the input is never pulled.
    """
    if not predicates:
        return
    matches = conjunction(*predicates)
    for element in iterable:
        if matches(element):
            yield element


def concatenate(*iterables: Iterable[T]) -> Iterator[T]:
    """Yield every element of each iterable in turn, exhausting one before the next."""
    for iterable in iterables:
        yield from iterable


def first_element(iterable: Iterable[T]) -> Optional[T]:
    """Return the first element, or None if the sequence is empty."""
    for element in iterable:
        return element
    return None


def only_element(iterable: Iterable[T]) -> Optional[T]:
    """Return the only element of a sequence, or None if it is empty.

    Raises:
        ConflictError: As soon as a second element is produced
    """
    retained = MISSING
    for element in iterable:
        if retained is not MISSING:
            raise ConflictError(retained, element)
        retained = element
    return None if retained is MISSING else retained


def all_elements(iterable: Iterable[T]) -> List[T]:
    """Materialise a finite sequence into a list."""
    return list(iterable)
