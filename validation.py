"""
폼 입력 검증 유틸리티
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from error_messages import get_error_message
from models import DIMENSIONS

EMAIL_REGEX = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

EMAIL_REQUIRED_MESSAGE = '이메일 주소를 입력해주세요.'
INVALID_EMAIL_MESSAGE = '유효하지 않은 이메일 주소입니다.'
INCOMPLETE_ANSWERS_MESSAGE = '모든 질문에 답변해주세요.'
QUESTIONS_LOAD_FAILED_MESSAGE = get_error_message('QUESTIONS_LOAD_FAILED')

QUESTIONS_PER_DIMENSION = 5


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


VALID = ValidationResult(is_valid=True)


def validate_email(email):
    """이메일 형식을 검증합니다 (앞뒤 공백은 무시)"""
    if not email or not email.strip():
        return ValidationResult(False, EMAIL_REQUIRED_MESSAGE)

    if not EMAIL_REGEX.match(email.strip()):
        return ValidationResult(False, INVALID_EMAIL_MESSAGE)

    return VALID


def validate_required(value, field_name):
    if not value or not value.strip():
        return ValidationResult(False, f'{field_name}을(를) 입력해주세요.')
    return VALID


def validate_all_questions_answered(answers: Dict[str, str], question_ids: Iterable[str]):
    """주어진 질문이 모두 답변되었는지 확인합니다"""
    if any(not answers.get(question_id) for question_id in question_ids):
        return ValidationResult(False, INCOMPLETE_ANSWERS_MESSAGE)
    return VALID


def validate_question_set(questions):
    """질문 세트가 15개(차원별 5개)인지 확인합니다"""
    counts = {dimension: 0 for dimension in DIMENSIONS}
    for question in questions:
        if question.dimension not in counts:
            return ValidationResult(False, QUESTIONS_LOAD_FAILED_MESSAGE)
        counts[question.dimension] += 1

    if any(count != QUESTIONS_PER_DIMENSION for count in counts.values()):
        return ValidationResult(False, QUESTIONS_LOAD_FAILED_MESSAGE)
    return VALID
