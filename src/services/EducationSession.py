from typing import Optional
from models import EducationState, QueryValidationError, ServiceUnavailableError
from stores.llm.templates.locales.en.response_templates import unexpected_error_response
from .QueryNormalizer import normalize_query, MAX_FIELD_CHARACTERS
import logging

logger = logging.getLogger(__name__)

class EducationSession:
    """Owns one EducationState and drives it through a single submission at a time.

    ``education_service`` is anything exposing ``async get_health_education(query)``:
    EducationService in-process, or EducationApiClient from the Streamlit shell.
    """

    def __init__(self, education_service, state: Optional[EducationState] = None,
                 max_field_characters: int = MAX_FIELD_CHARACTERS):
        self.education_service = education_service
        self.state = state if state is not None else EducationState()
        self.max_field_characters = max_field_characters

    async def submit(self, symptom: str, duration: str, context: str = "") -> EducationState:
        if self.state.is_pending:
            logger.warning("Submission ignored, a request is already in flight")
            return self.state

        try:
            query = normalize_query(symptom, duration, context,
                                    max_characters=self.max_field_characters)
        except QueryValidationError as e:
            self.state.reject(str(e))
            return self.state

        ticket = self.state.begin()

        try:
            answer = await self.education_service.get_health_education(query)
        except ServiceUnavailableError as e:
            self._complete(ticket, error=str(e))
        except Exception:
            logger.exception("Unexpected error while generating the education answer")
            self._complete(ticket, error=unexpected_error_response.substitute())
        else:
            self._complete(ticket, answer=answer)
        finally:
            # interrupted (cancelled, script stopped) before any completion
            if self.state.is_current(ticket):
                self.state.fail(unexpected_error_response.substitute())

        return self.state

    def reset(self) -> EducationState:
        self.state.reset()
        return self.state

    def _complete(self, ticket: int, answer: str = None, error: str = None):
        if not self.state.is_current(ticket):
            logger.info(f"Discarding response for stale submission #{ticket}")
            return

        if error is not None:
            self.state.fail(error)
        else:
            self.state.succeed(answer)
