from enum import Enum

class ResponseSignal(Enum):

    EDUCATION_GENERATE_SUCCESS = "education_generate_success"
    EDUCATION_VALIDATION_ERROR = "education_validation_error"
    EDUCATION_SERVICE_UNAVAILABLE = "education_service_unavailable"
