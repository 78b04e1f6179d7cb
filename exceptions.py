class InviteError(Exception):
    """Base class for errors reported back to the user after an action."""


class ValidationError(InviteError):
    """A required form field is missing or empty."""


class TimeError(InviteError):
    pass


class InvalidDateTime(TimeError):
    """The base date/time cannot be resolved in the chosen zone."""
