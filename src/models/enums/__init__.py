from .ResponseEnums import ResponseSignal
from .RequestStatusEnums import RequestStatus
