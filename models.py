"""
백엔드와 주고받는 데이터 구조
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

DIMENSIONS = {
    'EI': ('E', 'I'),
    'NS': ('N', 'S'),
    'TF': ('T', 'F'),
}


def parse_datetime(value):
    """ISO 8601 문자열을 datetime 으로 (이미 datetime 이면 그대로)"""
    if value is None or isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return datetime.fromisoformat(text)


@dataclass(frozen=True)
class Answer:
    id: str
    text: str
    value: str

    @classmethod
    def from_dict(cls, data):
        return cls(id=str(data['id']), text=data.get('text', ''), value=data['value'])


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    dimension: str
    answers: Tuple[Answer, Answer]

    @classmethod
    def from_dict(cls, data):
        answers = tuple(Answer.from_dict(a) for a in data.get('answers') or [])
        if len(answers) != 2:
            raise ValueError(f"Question {data.get('id')} must have exactly two answers")
        dimension = data['dimension']
        if dimension not in DIMENSIONS:
            raise ValueError(f"Unknown dimension: {dimension}")
        return cls(id=str(data['id']), text=data.get('text', ''), dimension=dimension, answers=answers)

    def find_answer(self, answer_id) -> Optional[Answer]:
        for answer in self.answers:
            if answer.id == answer_id:
                return answer
        return None


@dataclass(frozen=True)
class CharacterInfo:
    name: str
    description: str
    image_path: str
    mbti_types: Tuple[str, str]

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data.get('name', ''),
            description=data.get('description', ''),
            image_path=data.get('imagePath', ''),
            mbti_types=tuple(data.get('mbtiTypes') or ()),
        )


@dataclass(frozen=True)
class SubmissionResult:
    character: str
    character_info: CharacterInfo
    mbti_type: str

    @classmethod
    def from_dict(cls, data):
        return cls(
            character=data['character'],
            character_info=CharacterInfo.from_dict(data.get('characterInfo') or {}),
            mbti_type=data.get('mbtiType', ''),
        )


@dataclass(frozen=True)
class User:
    id: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        return cls(
            id=str(data['id']),
            email=data.get('email', ''),
            created_at=parse_datetime(data.get('createdAt')),
            updated_at=parse_datetime(data.get('updatedAt')),
        )


@dataclass(frozen=True)
class TestResult:
    id: str
    user_id: str
    character_type: str
    mbti_type: str
    completed_at: Optional[datetime] = None

    # pytest 가 이 클래스를 테스트로 수집하지 않도록
    __test__ = False

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data['id']),
            user_id=str(data.get('userId', '')),
            character_type=data['characterType'],
            mbti_type=data.get('mbtiType', ''),
            completed_at=parse_datetime(data.get('completedAt')),
        )
