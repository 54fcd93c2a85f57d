from fastapi import FastAPI
from controllers import base, education
from helpers.config import get_settings
from stores.llm.LLMProviderFactory import LLMProviderFactory
from stores.llm.templates.template_parser import TemplateParser
import logging

logger = logging.getLogger("uvicorn")

app = FastAPI()

async def startup_span():
    try:
        settings = get_settings()
        logger.info("Starting application with settings loaded")

        if not settings.GOOGLE_API_KEY:
            logger.warning("GOOGLE_API_KEY not set. Generation calls will fail unless provided.")

        # Initialize LLM provider
        logger.info(f"Initializing LLM provider: {settings.GENERATION_BACKEND}")
        llm_provider_factory = LLMProviderFactory(settings)
        app.generation_client = llm_provider_factory.create(provider=settings.GENERATION_BACKEND)
        if not app.generation_client:
            raise ValueError(f"Failed to create LLM provider: {settings.GENERATION_BACKEND}")
        app.generation_client.set_generation_model(model_id=settings.GENERATION_MODEL_ID)
        logger.info(f"LLM provider initialized with model: {settings.GENERATION_MODEL_ID}")

        # Initialize template parser
        logger.info("Initializing template parser")
        app.template_parser = TemplateParser(
            language=settings.PRIMARY_LANG,
            default_language=settings.DEFAULT_LANG,
        )
        logger.info("Template parser initialized")

        logger.info("Application startup completed successfully")

    except Exception as e:
        logger.error(f"Error during application startup: {str(e)}")
        raise

async def shutdown_span():
    logger.info("Application shutdown completed")

app.on_event("startup")(startup_span)
app.on_event("shutdown")(shutdown_span)

app.include_router(base.base_router)
app.include_router(education.education_router)
