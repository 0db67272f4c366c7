"""Exception types raised by the PostNL entity layer."""

from __future__ import annotations


class PostNLError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(PostNLError, ValueError):
    """A field value failed its validation rule."""


class UnknownNamespaceError(PostNLError, KeyError):
    """No namespace is registered for an entity field and service."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
