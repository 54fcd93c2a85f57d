from .LLMEnums import LLMEnums
from .providers import GoogleProvider

class LLMProviderFactory:
    def __init__(self, config):
        self.config = config

    def create(self, provider: str):
        if provider == LLMEnums.GOOGLE.value:
            return GoogleProvider(
                api_key=self.config.GOOGLE_API_KEY,
                default_generation_max_output_tokens=self.config.GENERATION_DEFAULT_MAX_TOKENS,
                default_generation_temperature=self.config.GENERATION_DEFAULT_TEMPERATURE,
            )

        return None
