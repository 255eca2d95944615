from typing import Any, Dict, List, Optional

import pytest

from app import create_app
from config import TestingConfig
from models import Question
from services.api import ApiClient

API_URL = "http://backend.test/api"

DIMENSION_LETTERS = [("EI", "E", "I"), ("NS", "N", "S"), ("TF", "T", "F")]


def make_question_payload() -> List[Dict[str, Any]]:
    """15 questions: q1-q5 EI, q6-q10 NS, q11-q15 TF. Answer ``a`` is the first letter."""
    questions = []
    number = 1
    for dimension, first, second in DIMENSION_LETTERS:
        for _ in range(5):
            questions.append(
                {
                    "id": f"q{number}",
                    "text": f"질문 {number}",
                    "dimension": dimension,
                    "answers": [
                        {"id": f"q{number}-a", "text": f"{first} 답변", "value": first},
                        {"id": f"q{number}-b", "text": f"{second} 답변", "value": second},
                    ],
                }
            )
            number += 1
    return questions


class DummyResponse:
    def __init__(self, status_code: int = 200, payload: Optional[Any] = None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class DummyBackend:
    """Routes ``(method, path)`` to canned responses and records every call."""

    def __init__(self):
        self.routes: Dict[tuple, tuple] = {}
        self.calls: List[tuple] = []

    def on(self, method, path, status=200, payload=None, error=None):
        self.routes[(method, path)] = (status, payload, error)

    def handle(self, method, url, json=None, params=None):
        path = url.split("/api", 1)[1]
        self.calls.append((method, path, json, params))
        if (method, path) not in self.routes:
            raise AssertionError(f"Unhandled {method} {path}")
        status, payload, error = self.routes[(method, path)]
        if error is not None:
            raise error
        return DummyResponse(status, payload)

    def called(self, method, path):
        return [call for call in self.calls if call[0] == method and call[1] == path]


class DummySession:
    def __init__(self, backend: DummyBackend):
        self.backend = backend
        self.headers: Dict[str, str] = {}
        self.closed = False

    def request(self, method, url, json=None, params=None, timeout=None):
        return self.backend.handle(method, url, json=json, params=params)

    def close(self):
        self.closed = True


class EmailAuthConfig(TestingConfig):
    ENABLE_EMAIL_AUTH = True


@pytest.fixture
def question_payload():
    return make_question_payload()


@pytest.fixture
def questions(question_payload):
    return [Question.from_dict(q) for q in question_payload]


@pytest.fixture
def backend(question_payload):
    dummy = DummyBackend()
    dummy.on("GET", "/test/questions", payload={"questions": question_payload})
    return dummy


@pytest.fixture
def api_client(backend):
    return ApiClient(API_URL, session=DummySession(backend))


@pytest.fixture
def app(backend):
    return create_app(TestingConfig, session_factory=lambda: DummySession(backend))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_app(backend):
    return create_app(EmailAuthConfig, session_factory=lambda: DummySession(backend))


@pytest.fixture
def auth_client(auth_app):
    return auth_app.test_client()


JOKER_RESULT = {
    "character": "joker",
    "characterInfo": {
        "name": "조커",
        "description": "판을 뒤집는 전략가",
        "imagePath": "/assets/characters/joker.png",
        "mbtiTypes": ["ENTJ", "ENTP"],
    },
    "mbtiType": "ENTJ",
}


def answer_question(client, question_id, choice="a"):
    return client.post(f"/test/answer/{question_id}", data={"answer": f"{question_id}-{choice}"})


def answer_all_pages(client, choice="a"):
    """Load the test, answer all 15 questions and stop on the last page."""
    client.get("/test")
    for page in range(3):
        for number in range(page * 5 + 1, page * 5 + 6):
            answer_question(client, f"q{number}", choice)
        if page < 2:
            client.post("/test/next")
