from enum import Enum

class RequestStatus(Enum):
    IDLE = "IDLE"
    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
