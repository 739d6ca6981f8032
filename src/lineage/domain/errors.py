"""Domain errors raised by record constructors."""


class InvalidArgument(ValueError):
    """A required field was absent (None)."""


class InvalidOperation(ValueError):
    """A field value is not allowed for the record."""
