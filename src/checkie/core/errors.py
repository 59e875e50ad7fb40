"""Exceptions raised by the core domain layer."""

from __future__ import annotations


class IllegalActionError(ValueError):
    """An action does not fit the board it is applied to.

    Actions must come from a generator run against the same board they are
    applied to; this error means that contract was broken.
    """
