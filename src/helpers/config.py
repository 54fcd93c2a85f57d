from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # API and model configuration
    GOOGLE_API_KEY: str = ""
    FASTAPI_URL: str = "http://localhost:5000"  # Default to localhost if not specified

    APP_NAME: str = "Health EduGuide"
    APP_VERSION: str = "0.1.0"

    GENERATION_BACKEND: str = "GOOGLE"
    GENERATION_MODEL_ID: str = "gemini-3-flash-preview"

    INPUT_MAX_FIELD_CHARACTERS: int = 1000
    GENERATION_DEFAULT_MAX_TOKENS: int = 2048
    GENERATION_DEFAULT_TEMPERATURE: float = 0.1

    PRIMARY_LANG: str = "en"
    DEFAULT_LANG: str = "en"

    model_config = SettingsConfigDict(env_file=".env", extra="allow")

def get_settings():
    return Settings()
