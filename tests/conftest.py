from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from quimica.config import Settings
from quimica.llm import ReactionPredictor
from quimica.main import create_app

PEROXIDE_TEXT = "H2O2\nPeróxido de hidrogênio\nComposto usado como alvejante e desinfetante.\n🧪"

PEROXIDE = {
    "formula": "H2O2",
    "name": "Peróxido de hidrogênio",
    "description": "Composto usado como alvejante e desinfetante.",
    "emoji": "🧪",
}


class FakeCompletions:
    def __init__(self, content=None, exc=None, usage=None, choices=None):
        self.content = content
        self.exc = exc
        self.usage = usage
        self.choices = choices
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        choices = self.choices
        if choices is None:
            choices = [SimpleNamespace(message=SimpleNamespace(content=self.content))]
        return SimpleNamespace(choices=choices, usage=self.usage)


class FakeClient:
    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def settings():
    return Settings(openai_api_key="test-key")


@pytest.fixture
def make_predictor(settings):
    def _make(settings_overrides=None, **client_kwargs):
        s = settings.model_copy(update=settings_overrides or {})
        return ReactionPredictor(s, client=FakeClient(**client_kwargs))
    return _make


@pytest.fixture
def make_api(make_predictor):
    def _make(settings_overrides=None, **client_kwargs):
        predictor = make_predictor(settings_overrides, **client_kwargs)
        return TestClient(create_app(predictor=predictor)), predictor
    return _make
