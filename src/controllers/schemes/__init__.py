from .education import EducationRequest
