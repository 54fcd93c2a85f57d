from pydantic import BaseModel, ConfigDict, Field

NOT_PROVIDED = "Not provided"

class SymptomQuery(BaseModel):
    """Normalized user query, ready for prompt construction."""
    model_config = ConfigDict(frozen=True)

    symptom: str = Field(..., min_length=1, description="Primary symptom reported by the user")
    duration: str = Field(..., min_length=1, description="How long the symptom has lasted")
    context: str = Field(default=NOT_PROVIDED, description="Optional general context")
