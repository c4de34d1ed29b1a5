"""Exceptions raised by the static search tree."""

from __future__ import annotations


class StaticTreeError(Exception):
    """Base class for errors raised by :mod:`statictree`."""


class ResourceExhausted(StaticTreeError):
    """A build would exceed one of the configured size budgets.

    Raised instead of returning a partial tree, so a budget overrun is never
    mistaken for "no matches".
    """

    def __init__(self, limit_name: str, limit: int, requested: int):
        self.limit_name = limit_name
        self.limit = limit
        self.requested = requested
        super().__init__(
            f"{limit_name} budget exceeded: {requested:,} requested, limit is {limit:,}"
        )
