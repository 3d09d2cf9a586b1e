"""Exceptions raised when decoding or validating chord data."""


class ValidationError(ValueError):
    """A chord record or tuning violates its structural invariants."""


class UnknownIdentifierError(ValueError):
    """A key, suffix or tuning name is not recognized."""
