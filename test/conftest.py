"""
Pytest configuration and shared fixtures for all tests.

The LLM agents and the PDF reader are replaced with fakes; every test gets its
own empty document store under tmp_path.
"""
import os
import tempfile
from types import SimpleNamespace

# Point the store somewhere disposable *before* any app module creates ./data.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="pdfqd-test-"))
os.environ["LANGSMITH_TRACING"] = "0"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from backend.app.main import app  # noqa: E402
from backend.app.services.agent_registry import agent_registry  # noqa: E402
from shared.config import settings  # noqa: E402


class FakeAgent:
    """Stands in for an AssistantAgent: records tasks, returns a canned reply."""

    def __init__(self, name, reply):
        self.name = name
        self.reply = reply
        self.tasks = []

    async def run(self, task):
        self.tasks.append(task)
        if isinstance(self.reply, Exception):
            raise self.reply
        content = self.reply(task) if callable(self.reply) else self.reply
        return SimpleNamespace(messages=[SimpleNamespace(content=content)])


class FakeLLM:
    """Per-agent-name replies; a reply may be a string, a callable of the task, or an exception."""

    def __init__(self):
        self.replies = {
            "question_extractor": '["What is X?"]',
            "answerer": "X is the answer.",
        }
        self.agents = []

    async def build(self, name, system_message):
        agent = FakeAgent(name, self.replies[name])
        agent.system_message = system_message
        self.agents.append(agent)
        return agent

    def tasks(self, name):
        return [t for a in self.agents if a.name == name for t in a.tasks]


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


@pytest.fixture(autouse=True)
def store_dir(tmp_path, monkeypatch):
    """Give every test an empty document store."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    return tmp_path


@pytest.fixture
def fake_llm(monkeypatch):
    llm = FakeLLM()
    monkeypatch.setattr(agent_registry, "build", llm.build)
    return llm


@pytest.fixture
def fake_pdf(monkeypatch):
    """Patch pypdf's reader; set `.pages` on the returned object to control the text."""
    state = SimpleNamespace(pages=["Page one text.", "What is X?"], opened=[])

    def _reader(stream):
        state.opened.append(stream.read())
        return SimpleNamespace(pages=[FakePage(t) for t in state.pages])

    monkeypatch.setattr("backend.app.services.pdf_extractor.PdfReader", _reader)
    return state


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def sample_documents():
    return [
        {
            "id": "doc-1",
            "filename": "Biology Exam.pdf",
            "text": "What is photosynthesis? Plants turn light into sugar.",
            "questions": ["What is photosynthesis?", "Why are leaves green?"],
            "answers": {"What is photosynthesis?": "Plants turn light into sugar."},
        },
        {
            "id": "doc-2",
            "filename": "history.pdf",
            "text": "When did the war end? It ended in 1945.",
            "questions": ["When did the war end?"],
            "answers": {"When did the war end?": "The FOO treaty ended it in 1945."},
        },
    ]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
