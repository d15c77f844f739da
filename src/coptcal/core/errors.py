class CoptcalError(Exception):
    """Base error."""

class InvalidDateError(CoptcalError, ValueError):
    """Raised for a civil or Coptic date label that does not exist."""

class CalendarInvariantError(CoptcalError, RuntimeError):
    """Raised when a computed Coptic date falls outside its month. Indicates broken epoch/leap arithmetic."""
