from fastapi import APIRouter, Depends, status, Request
from fastapi.responses import JSONResponse
from controllers.schemes.education import EducationRequest
from helpers.config import get_settings, Settings
from models import ResponseSignal, QueryValidationError, ServiceUnavailableError
from services import EducationService, normalize_query

import logging

logger = logging.getLogger('uvicorn.error')

education_router = APIRouter(
    prefix="/api/v1/education",
    tags=["api_v1", "education"],
)

@education_router.post("/generate", summary="Generate an educational guide for a symptom", description="Validates the symptom, duration and optional context, then asks the generation backend for a five-section HTML guide. Returns the HTML answer, or a validation / service error message.")
async def generate_education(request: Request, education_request: EducationRequest,
                             app_settings: Settings = Depends(get_settings)):

    try:
        query = normalize_query(
            symptom=education_request.symptom,
            duration=education_request.duration,
            context=education_request.context,
            max_characters=app_settings.INPUT_MAX_FIELD_CHARACTERS,
        )
    except QueryValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "signal": ResponseSignal.EDUCATION_VALIDATION_ERROR.value,
                "message": str(e),
            }
        )

    education_service = EducationService(
        generation_client=request.app.generation_client,
        template_parser=request.app.template_parser,
    )

    try:
        answer = await education_service.get_health_education(query)
    except ServiceUnavailableError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "signal": ResponseSignal.EDUCATION_SERVICE_UNAVAILABLE.value,
                "message": str(e),
            }
        )

    return JSONResponse(
        content={
            "signal": ResponseSignal.EDUCATION_GENERATE_SUCCESS.value,
            "answer": answer,
        }
    )
