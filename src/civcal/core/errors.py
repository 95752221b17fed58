class CivcalError(Exception):
    """Base error."""

class InvalidDate(CivcalError, ValueError):
    """Raised when a civil date is not valid in the calendar it is given to."""

class InvalidConfiguration(CivcalError, ValueError):
    """Raised when a CalendarConfig field is outside its declared range."""
