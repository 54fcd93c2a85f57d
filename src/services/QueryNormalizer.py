from typing import Optional
from models import SymptomQuery, NOT_PROVIDED, QueryValidationError
from stores.llm.templates.locales.en.response_templates import validation_error_response

MAX_FIELD_CHARACTERS = 1000

def _clean(value: Optional[str], max_characters: int) -> str:
    return (value or "").strip()[:max_characters].strip()

def normalize_query(symptom: Optional[str], duration: Optional[str],
                    context: Optional[str] = None,
                    max_characters: int = MAX_FIELD_CHARACTERS) -> SymptomQuery:
    """Validate the raw form fields and build a SymptomQuery.

    Symptom and duration are required; a blank context becomes "Not provided".
    Each field is cut to ``max_characters`` before it reaches the prompt template.
    """
    symptom = _clean(symptom, max_characters)
    duration = _clean(duration, max_characters)
    context = _clean(context, max_characters)

    if not symptom or not duration:
        raise QueryValidationError(validation_error_response.substitute())

    return SymptomQuery(
        symptom=symptom,
        duration=duration,
        context=context or NOT_PROVIDED,
    )
