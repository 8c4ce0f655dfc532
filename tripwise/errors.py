"""
errors.py
---------
Exception types raised by the TripWise core.

Under valid input nothing in the core raises; these cover option strings
arriving from outside (forms, persisted records) that do not parse.
"""


class TripwiseError(Exception):
    """Base class for every error raised by this package."""


class UnknownOptionError(TripwiseError, ValueError):
    """An enumerated option (style, budget, weather, ...) was not recognised."""

    def __init__(self, kind: str, value: object, allowed: list[str]) -> None:
        self.kind = kind
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Unknown {kind} {value!r}; expected one of: {', '.join(allowed)}"
        )
