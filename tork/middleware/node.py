"""Middleware chains around handlers, used as is for node handlers."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable

HandlerFunc = Callable[..., Any]
MiddlewareFunc = Callable[[HandlerFunc], HandlerFunc]


def apply_middleware(
    handler: HandlerFunc, middlewares: Iterable[MiddlewareFunc]
) -> HandlerFunc:
    """Wrap ``handler`` so that the middlewares run first, in list order."""
    layers = tuple(middlewares)

    def run(*args: Any) -> Any:
        chained = reduce(lambda inner, mw: mw(inner), reversed(layers), handler)
        return chained(*args)

    return run