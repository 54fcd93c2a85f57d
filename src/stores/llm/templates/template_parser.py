import os
import importlib
import logging

class TemplateParser:

    def __init__(self, language: str = None, default_language: str = 'en'):
        self.current_path = os.path.dirname(os.path.abspath(__file__))
        self.default_language = default_language
        self.language = None
        self.logger = logging.getLogger(__name__)

        self.set_language(language)

    def set_language(self, language: str):
        if not language:
            self.language = self.default_language
            return

        language_path = os.path.join(self.current_path, "locales", language)
        if os.path.exists(language_path):
            self.language = language
        else:
            self.logger.warning(f"Locale '{language}' not found, using '{self.default_language}'")
            self.language = self.default_language

    def get(self, group: str, key: str, vars: dict = None):
        if not group or not key:
            return None

        targeted_language = self.language
        group_path = os.path.join(self.current_path, "locales", targeted_language, f"{group}.py")
        if not os.path.exists(group_path):
            targeted_language = self.default_language
            group_path = os.path.join(self.current_path, "locales", targeted_language, f"{group}.py")

        if not os.path.exists(group_path):
            self.logger.error(f"Template group '{group}' not found")
            return None

        module = importlib.import_module(f"stores.llm.templates.locales.{targeted_language}.{group}")
        if not module:
            return None

        key_attribute = getattr(module, key, None)
        if key_attribute is None:
            return None

        return key_attribute.substitute(vars or {})
