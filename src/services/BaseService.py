from helpers.config import get_settings

class BaseService:

    def __init__(self):
        self.app_settings = get_settings()
