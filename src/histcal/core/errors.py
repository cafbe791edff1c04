class HistcalError(Exception):
    """Base error."""

class InvalidConstructionError(HistcalError, ValueError):
    """Raised when a history cannot be built from the given cutover events."""

class InvalidDateError(HistcalError, ValueError):
    """Raised for a historic date that is malformed, in a cutover gap, or rejected by its algorithm."""

class PersistedFormError(HistcalError, ValueError):
    """Raised when bytes do not hold a valid persisted history."""
