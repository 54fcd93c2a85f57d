from pydantic import BaseModel
from typing import Optional

class EducationRequest(BaseModel):
    # Left optional so blank fields reach the query normalizer instead of failing with 422
    symptom: Optional[str] = None
    duration: Optional[str] = None
    context: Optional[str] = None
