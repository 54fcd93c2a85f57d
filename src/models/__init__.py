from .enums import ResponseSignal, RequestStatus
from .SymptomQuery import SymptomQuery, NOT_PROVIDED
from .EducationState import EducationState
from .exceptions import QueryValidationError, ServiceUnavailableError, InvalidTransitionError

__all__ = [
    "ResponseSignal",
    "RequestStatus",
    "SymptomQuery",
    "NOT_PROVIDED",
    "EducationState",
    "QueryValidationError",
    "ServiceUnavailableError",
    "InvalidTransitionError",
]
