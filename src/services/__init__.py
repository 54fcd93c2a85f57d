from .QueryNormalizer import normalize_query
from .EducationService import EducationService
from .EducationSession import EducationSession
from .EducationApiClient import EducationApiClient
