"""Record validation error."""


class RecordValidationError(ValueError):
    """A record was rejected before any store mutation."""
