import asyncio
import pytest
from stores.llm.templates.template_parser import TemplateParser


class FakeGenerationClient:
    """Stands in for GoogleProvider; records every call it receives."""

    def __init__(self, answer="<h3>General Explanation</h3><p>ok</p>", error=None, gate=None):
        self.answer = answer
        self.error = error
        self.gate = gate
        self.calls = []

    async def generate_text(self, prompt, system_prompt=None, max_output_tokens=None, temperature=None):
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
        })
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def template_parser():
    return TemplateParser(language="en", default_language="en")


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


def run(coro):
    return asyncio.run(coro)
