from .BaseService import BaseService
from models import SymptomQuery, ServiceUnavailableError
import logging

logger = logging.getLogger('uvicorn.error')

class EducationService(BaseService):

    def __init__(self, generation_client, template_parser):
        super().__init__()

        self.generation_client = generation_client
        self.template_parser = template_parser

    def build_system_prompt(self) -> str:
        return self.template_parser.get("health_education", "system_prompt")

    def build_prompt(self, query: SymptomQuery) -> str:
        return self.template_parser.get("health_education", "user_prompt", {
            "symptom": query.symptom,
            "duration": query.duration,
            "context": query.context,
        })

    async def get_health_education(self, query: SymptomQuery) -> str:
        """Ask the generation client for the educational HTML answer.

        An empty answer is replaced by the fallback paragraph. Any failure
        talking to the client is logged and re-raised as
        ServiceUnavailableError carrying only the generic message.
        """

        # step1: construct prompts
        system_prompt = self.build_system_prompt()
        prompt = self.build_prompt(query)

        # step2: retrieve the answer
        try:
            answer = await self.generation_client.generate_text(
                prompt=prompt,
                system_prompt=system_prompt,
                temperature=self.app_settings.GENERATION_DEFAULT_TEMPERATURE,
            )
        except Exception as e:
            logger.error(f"Generation API error: {e}", exc_info=True)
            raise ServiceUnavailableError(
                self.template_parser.get("response_templates", "service_unavailable_response")
            ) from None

        # step3: fall back on empty output
        if not answer or not answer.strip():
            logger.warning("Generation client returned an empty answer, using fallback")
            return self.template_parser.get("response_templates", "fallback_response")

        return answer
