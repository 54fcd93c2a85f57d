class QueryValidationError(ValueError):
    """Raised when a required query field (symptom or duration) is blank."""

class ServiceUnavailableError(RuntimeError):
    """Raised when the text-generation service cannot produce an answer.

    The message is always the generic user-facing text; the underlying
    cause is logged where it is caught and is not chained.
    """

class InvalidTransitionError(RuntimeError):
    """Raised on a RequestStatus transition the state store does not allow."""
