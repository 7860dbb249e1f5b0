from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A value handed to the core is out of range (negative amount, unknown kind...)."""


class IllegalStateError(RuntimeError):
    """A builder was asked to mutate its invoice after build() finalized it."""
