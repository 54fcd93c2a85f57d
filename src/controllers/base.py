from fastapi import APIRouter, Depends
from helpers.config import get_settings, Settings

base_router = APIRouter(
    prefix="/api/v1",
    tags=["api_v1"],
)

@base_router.get("/")
async def app_info(app_settings: Settings = Depends(get_settings)):
    """
    App name and version, plus which generation backend and model answer requests.
    ``generation_ready`` is false until a Google API key is configured.
    """
    return {
        "app_name": app_settings.APP_NAME,
        "app_version": app_settings.APP_VERSION,
        "generation_backend": app_settings.GENERATION_BACKEND,
        "generation_model_id": app_settings.GENERATION_MODEL_ID,
        "generation_ready": bool(app_settings.GOOGLE_API_KEY),
    }
