import asyncio
import logging
import requests
from models import SymptomQuery, ResponseSignal, ServiceUnavailableError
from stores.llm.templates.locales.en.response_templates import service_unavailable_response

logger = logging.getLogger(__name__)

class EducationApiClient:
    """Calls the education API over HTTP with the same contract as EducationService."""

    def __init__(self, generate_url: str, timeout: int = 60):
        self.generate_url = generate_url
        self.timeout = timeout

    def _post(self, payload: dict) -> dict:
        response = requests.post(self.generate_url, json=payload, timeout=self.timeout)
        return response.json()

    async def get_health_education(self, query: SymptomQuery) -> str:
        payload = {
            "symptom": query.symptom,
            "duration": query.duration,
            "context": query.context,
        }

        try:
            data = await asyncio.to_thread(self._post, payload)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error while contacting the education API: {e}", exc_info=True)
            raise ServiceUnavailableError(service_unavailable_response.substitute()) from None

        if not isinstance(data, dict):
            logger.error(f"Unexpected education API body: {data!r}")
            raise ServiceUnavailableError(service_unavailable_response.substitute())

        if data.get("signal") != ResponseSignal.EDUCATION_GENERATE_SUCCESS.value:
            raise ServiceUnavailableError(data.get("message") or service_unavailable_response.substitute())

        return data.get("answer") or ""
