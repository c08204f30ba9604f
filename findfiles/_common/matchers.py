"""Blocking matcher combinators.

A matcher is a predicate over a path. It may raise; the exception is
propagated to whoever is evaluating it. Both combinators are false for an
empty matcher list, which is what makes "no tests" mean "no matches".
"""

from typing import Any, Callable

Matcher = Callable[[Any], bool]


def conjunction(*matchers: Matcher) -> Matcher:
    """Combine matchers with logical AND, short-circuiting on the first failure.

    Args:
        *matchers: Matchers every element must pass

    Returns:
        A matcher that is True only if all matchers pass (False when none are given)
    """
    def matches(element: Any) -> bool:
        if not matchers:
            return False
        for matcher in matchers:
            if not matcher(element):
                return False
        return True

    return matches


def disjunction(*matchers: Matcher) -> Matcher:
    """Combine matchers with logical OR, short-circuiting on the first success."""
    def matches(element: Any) -> bool:
        for matcher in matchers:
            if matcher(element):
                return True
        return False

    return matches
