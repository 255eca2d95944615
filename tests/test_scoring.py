import pytest

from reports.content_data import CHARACTER_DESCRIPTIONS
from reports.scoring import (
    CHARACTER_BY_MBTI,
    ScoringError,
    calculate_mbti,
    calculate_result,
    map_to_character,
    resolve_dimension,
    tally_dimensions,
)


def _answers(ei, ns, tf):
    """Build 15 (dimension, value) pairs from three 5-letter strings."""
    return (
        [("EI", v) for v in ei]
        + [("NS", v) for v in ns]
        + [("TF", v) for v in tf]
    )


def test_all_first_letters_give_entj_joker():
    result = calculate_result(_answers("EEEEE", "NNNNN", "TTTTT"))

    assert result.mbti_type == "ENTJ"
    assert result.character == "joker"
    assert result.character_info.name == "조커"


def test_majority_wins_per_dimension():
    assert calculate_mbti(_answers("EEIII", "NNNSS", "FFFFT")) == "INFJ"
    assert map_to_character("INFJ") == "skeleton"


def test_tie_goes_to_first_letter():
    assert resolve_dimension(["E", "I"], "E", "I") == "E"
    assert resolve_dimension([], "N", "S") == "N"
    assert resolve_dimension(["I", "I", "E"], "E", "I") == "I"


def test_accepts_mapping_answers():
    answers = [{"dimension": d, "value": v} for d, v in _answers("IIIII", "SSSSS", "TTTTT")]

    assert calculate_mbti(answers) == "ISTJ"


@pytest.mark.parametrize(
    "ei, ns, tf, expected",
    [
        ("EEEEE", "SSSSS", "TTTTT", "zombie"),
        ("EEEEE", "NNNNN", "TTTTT", "joker"),
        ("IIIII", "NNNNN", "FFFFF", "skeleton"),
        ("IIIII", "SSSSS", "FFFFF", "nun"),
        ("EEEEE", "NNNNN", "FFFFF", "jack-o-lantern"),
        ("IIIII", "SSSSS", "TTTTT", "vampire"),
        ("EEEEE", "SSSSS", "FFFFF", "ghost"),
        ("IIIII", "NNNNN", "TTTTT", "frankenstein"),
    ],
)
def test_every_character_is_reachable(ei, ns, tf, expected):
    assert calculate_result(_answers(ei, ns, tf)).character == expected


def test_mbti_table_covers_sixteen_codes_two_per_character():
    assert len(CHARACTER_BY_MBTI) == 16
    for character, data in CHARACTER_DESCRIPTIONS.items():
        codes = [code for code, owner in CHARACTER_BY_MBTI.items() if owner == character]
        assert sorted(codes) == sorted(data["mbtiTypes"])


def test_judging_letter_is_always_j():
    for ei in ("EEEEE", "IIIII"):
        assert calculate_mbti(_answers(ei, "SSSSS", "FFFFF")).endswith("J")


def test_wrong_answer_count_is_rejected():
    with pytest.raises(ScoringError):
        calculate_mbti(_answers("EEEEE", "NNNNN", "TTTT"))


def test_uneven_dimension_split_is_rejected():
    answers = _answers("EEEEEE", "NNNN", "TTTTT")
    assert len(answers) == 15

    with pytest.raises(ScoringError):
        calculate_mbti(answers)


def test_value_outside_dimension_is_rejected():
    with pytest.raises(ScoringError):
        tally_dimensions([("EI", "N")])

    with pytest.raises(ScoringError):
        tally_dimensions([("JP", "J")])


def test_unknown_code_has_no_character():
    with pytest.raises(ScoringError):
        map_to_character("XXXX")
