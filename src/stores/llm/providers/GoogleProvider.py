from ..LLMInterface import LLMInterface
import google.generativeai as genai
import logging

class GoogleProvider(LLMInterface):
    def __init__(self, api_key: str,
                 default_generation_max_output_tokens: int=1000,
                 default_generation_temperature: float=0.1):

        self.api_key = api_key
        self.default_generation_max_output_tokens = default_generation_max_output_tokens
        self.default_generation_temperature = default_generation_temperature

        self.generation_model_id = None

        # Configure the Google API client
        genai.configure(api_key=self.api_key)
        self.client = genai

        self.logger = logging.getLogger(__name__)

    def set_generation_model(self, model_id: str):
        self.generation_model_id = model_id

    async def generate_text(self, prompt: str, system_prompt: str = None,
                            max_output_tokens: int = None, temperature: float = None):

        if not self.generation_model_id:
            self.logger.error("Generation model for Google was not set")
            return None

        max_output_tokens = max_output_tokens if max_output_tokens else self.default_generation_max_output_tokens
        temperature = temperature if temperature is not None else self.default_generation_temperature

        # The system instruction is bound to the model, never sent as a chat turn
        model = self.client.GenerativeModel(
            self.generation_model_id,
            system_instruction=system_prompt,
        )

        response = await model.generate_content_async(
            prompt,
            generation_config={
                'max_output_tokens': max_output_tokens,
                'temperature': temperature
            }
        )

        if not response:
            self.logger.warning("Empty response while generating text with Google")
            return None

        # .text raises ValueError when the candidate has no parts (e.g. blocked by safety filters)
        try:
            text = response.text
        except ValueError as e:
            self.logger.warning(f"Google response carried no text: {e}")
            return None

        return text
