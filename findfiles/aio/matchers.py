"""Async matcher combinators.

The combined matcher is a coroutine function. Each matcher may be a plain
predicate or a coroutine function; awaitable results are awaited one at a
time, in order, so short-circuiting behaves exactly like the blocking form.
"""

import inspect
from typing import Any, Awaitable, Callable

AsyncMatcher = Callable[[Any], Awaitable[bool]]


async def _evaluate(matcher: Callable[[Any], Any], element: Any) -> bool:
    result = matcher(element)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


def conjunction(*matchers: Callable[[Any], Any]) -> AsyncMatcher:
    """Combine matchers with logical AND; False when no matchers are given."""
    async def matches(element: Any) -> bool:
        if not matchers:
            return False
        for matcher in matchers:
            if not await _evaluate(matcher, element):
                return False
        return True

    return matches


def disjunction(*matchers: Callable[[Any], Any]) -> AsyncMatcher:
    """Combine matchers with logical OR; False when no matchers are given."""
    async def matches(element: Any) -> bool:
        for matcher in matchers:
            if await _evaluate(matcher, element):
                return True
        return False

    return matches
