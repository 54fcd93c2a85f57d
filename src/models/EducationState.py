from pydantic import BaseModel, Field
from typing import Optional
from .enums import RequestStatus
from .exceptions import InvalidTransitionError

ALLOWED_TRANSITIONS = {
    RequestStatus.IDLE: {RequestStatus.PENDING},
    RequestStatus.PENDING: {RequestStatus.SUCCEEDED, RequestStatus.FAILED},
    RequestStatus.SUCCEEDED: {RequestStatus.PENDING},
    RequestStatus.FAILED: {RequestStatus.PENDING},
}

class EducationState(BaseModel):
    """UI state for one form: status, rendered answer and error message.

    Only ``begin``, ``succeed``, ``fail`` and ``reset`` move the status.
    ``ticket`` identifies the submission currently allowed to complete;
    ``reset`` bumps it so a response that lands afterwards is recognised
    as stale by the caller.
    """
    status: RequestStatus = Field(default=RequestStatus.IDLE)
    result: Optional[str] = Field(default=None, description="HTML answer of the last successful request")
    error: Optional[str] = Field(default=None, description="User-facing error message")
    ticket: int = Field(default=0)

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    def _move(self, target: RequestStatus):
        if target not in ALLOWED_TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Cannot move from {self.status.value} to {target.value}"
            )
        self.status = target

    def is_current(self, ticket: int) -> bool:
        return self.is_pending and ticket == self.ticket

    def begin(self) -> int:
        self._move(RequestStatus.PENDING)
        self.error = None
        self.result = None
        self.ticket += 1
        return self.ticket

    def succeed(self, result: str):
        self._move(RequestStatus.SUCCEEDED)
        self.result = result

    def fail(self, message: str):
        self._move(RequestStatus.FAILED)
        self.error = message

    def reject(self, message: str):
        # Validation failures leave status and result untouched
        self.error = message

    def reset(self):
        self.status = RequestStatus.IDLE
        self.result = None
        self.error = None
        self.ticket += 1
