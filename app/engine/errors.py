"""
Error taxonomy for the analytics engine.

Every error raised by the engine derives from :class:`TrainingLoadError`
so that callers (services, batch runners) can isolate a single athlete's
bad data without catching unrelated exceptions.

- :class:`InvalidInputError` — a value outside its documented domain
  (RPE outside 1-10, non-positive divisor, unknown zone input, ...).
- :class:`UnknownTestError` — a biomotor ``test_id`` (or norm key) that
  is not present in the catalog / norm table.

An empty session list is **not** an error: it produces an empty series.
"""


class TrainingLoadError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(TrainingLoadError, ValueError):
    """Raised when an input value is outside its valid domain."""


class UnknownTestError(TrainingLoadError, KeyError):
    """Raised when a biomotor test or norm entry cannot be found."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ""
