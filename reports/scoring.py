"""
답변 집계 -> MBTI 코드 -> 할로윈 캐릭터 매핑
"""
from typing import Dict, Iterable, Mapping, Tuple

from models import DIMENSIONS, SubmissionResult
from reports.content_data import CHARACTER_DESCRIPTIONS, get_character_info

EXPECTED_ANSWERS = 15
ANSWERS_PER_DIMENSION = 5
FIXED_JUDGING_LETTER = 'J'

# 16 MBTI codes -> 8 characters
CHARACTER_BY_MBTI: Dict[str, str] = {
    code: character
    for character, data in CHARACTER_DESCRIPTIONS.items()
    for code in data['mbtiTypes']
}


class ScoringError(ValueError):
    """집계 전제조건 위반 (답변 수, 차원 분포, 알 수 없는 코드)"""


def _as_pair(answer) -> Tuple[str, str]:
    if isinstance(answer, Mapping):
        return answer['dimension'], answer['value']
    return answer


def resolve_dimension(values: Iterable[str], first: str, second: str) -> str:
    """다수결. 동점이면 첫 번째 글자가 이긴다."""
    values = list(values)
    first_count = values.count(first)
    second_count = values.count(second)
    return first if first_count >= second_count else second


def tally_dimensions(answers) -> str:
    """(dimension, value) 목록을 4글자 MBTI 코드로 변환 (마지막 글자는 항상 J)"""
    by_dimension = {dimension: [] for dimension in DIMENSIONS}
    for answer in answers:
        dimension, value = _as_pair(answer)
        if dimension not in by_dimension:
            raise ScoringError(f"Unknown dimension: {dimension}")
        if value not in DIMENSIONS[dimension]:
            raise ScoringError(f"Value {value!r} does not belong to dimension {dimension}")
        by_dimension[dimension].append(value)

    letters = [
        resolve_dimension(by_dimension[dimension], first, second)
        for dimension, (first, second) in DIMENSIONS.items()
    ]
    return ''.join(letters) + FIXED_JUDGING_LETTER


def calculate_mbti(answers) -> str:
    """정확히 15개(차원별 5개)의 답변을 요구하는 엄격한 버전"""
    pairs = [_as_pair(answer) for answer in answers]
    if len(pairs) != EXPECTED_ANSWERS:
        raise ScoringError(f"Expected exactly {EXPECTED_ANSWERS} answers, got {len(pairs)}")

    for dimension in DIMENSIONS:
        count = sum(1 for d, _ in pairs if d == dimension)
        if count != ANSWERS_PER_DIMENSION:
            raise ScoringError(
                f"Expected {ANSWERS_PER_DIMENSION} answers for dimension {dimension}, got {count}"
            )

    return tally_dimensions(pairs)


def map_to_character(mbti_type: str) -> str:
    character = CHARACTER_BY_MBTI.get(mbti_type)
    if character is None:
        raise ScoringError(f"Unknown MBTI type: {mbti_type}")
    return character


def calculate_result(answers) -> SubmissionResult:
    mbti_type = calculate_mbti(answers)
    character = map_to_character(mbti_type)
    return SubmissionResult(
        character=character,
        character_info=get_character_info(character),
        mbti_type=mbti_type,
    )
