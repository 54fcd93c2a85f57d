from enum import Enum

class LLMEnums(Enum):
    GOOGLE = "GOOGLE"
