from dataclasses import replace

from models import SubmissionResult
from reports.content_data import get_character_info
from store import test_slice
from store.request_state import NOT_STARTED, Failed, Pending
from validation import INCOMPLETE_ANSWERS_MESSAGE, QUESTIONS_LOAD_FAILED_MESSAGE


def _loaded(questions):
    return test_slice.set_questions(test_slice.load_started(test_slice.INITIAL_STATE), questions)


def _answer_page(state, choice="a"):
    for question in test_slice.select_current_page_questions(state):
        state = test_slice.set_answer(state, question.id, f"{question.id}-{choice}")
    return state


def _answer_all(state, choice="a"):
    for question in state.questions:
        state = test_slice.set_answer(state, question.id, f"{question.id}-{choice}")
    return state


def _result():
    return SubmissionResult("joker", get_character_info("joker"), "ENTJ")


def test_set_questions_starts_on_first_of_three_pages(questions):
    state = _loaded(questions)

    assert state.current_page == 1
    assert test_slice.select_total_pages(state) == 3
    assert [q.id for q in test_slice.select_current_page_questions(state)] == ["q1", "q2", "q3", "q4", "q5"]
    assert not test_slice.select_is_loading(state)


def test_load_failure_is_reported():
    state = test_slice.load_failed(test_slice.load_started(test_slice.INITIAL_STATE), "질문 실패", "QUESTIONS_LOAD_FAILED")

    assert test_slice.select_error(state) == "질문 실패"
    assert isinstance(state.questions_request, Failed)
    assert test_slice.select_needs_questions(state)


def test_empty_test_is_never_complete():
    assert not test_slice.select_is_test_complete(test_slice.INITIAL_STATE)
    assert test_slice.select_needs_questions(test_slice.INITIAL_STATE)


def test_incomplete_page_blocks_next(questions):
    state = test_slice.set_answer(_loaded(questions), "q1", "q1-a")

    state = test_slice.next_page(state)

    assert state.current_page == 1
    assert state.validation_error == INCOMPLETE_ANSWERS_MESSAGE


def test_answering_clears_validation_error(questions):
    state = test_slice.next_page(_loaded(questions))
    assert state.validation_error

    state = test_slice.set_answer(state, "q2", "q2-b")

    assert state.validation_error is None
    assert state.current_page == 1


def test_unknown_answers_are_ignored(questions):
    state = _loaded(questions)

    assert test_slice.set_answer(state, "q99", "q99-a") is state
    assert test_slice.set_answer(state, "q1", "q2-a") is state


def test_pages_move_forward_and_back_keeping_answers(questions):
    state = test_slice.next_page(_answer_page(_loaded(questions)))
    assert state.current_page == 2
    assert [q.id for q in test_slice.select_current_page_questions(state)][0] == "q6"

    state = test_slice.prev_page(state)

    assert state.current_page == 1
    assert test_slice.select_is_current_page_complete(state)
    assert state.answers["q3"] == "q3-a"


def test_prev_on_first_page_stays(questions):
    assert test_slice.prev_page(_loaded(questions)).current_page == 1


def test_next_on_last_page_stays(questions):
    state = _answer_all(_loaded(questions))
    for _ in range(5):
        state = test_slice.next_page(state)

    assert state.current_page == 3
    assert test_slice.select_is_last_page(state)


def test_can_submit_only_on_complete_last_page(questions):
    state = _answer_all(_loaded(questions))
    assert test_slice.select_is_test_complete(state)
    assert not test_slice.select_can_submit(state)

    state = test_slice.next_page(test_slice.next_page(state))
    assert test_slice.select_can_submit(state)

    state = test_slice.submit_started(state)
    assert isinstance(state.submit_request, Pending)
    assert test_slice.select_is_loading(state)
    assert not test_slice.select_can_submit(state)


def test_submission_payload_follows_question_order(questions):
    state = _answer_all(_loaded(questions), choice="b")

    payload = test_slice.select_answers_for_submission(state)

    assert len(payload) == 15
    assert payload[0] == {"questionId": "q1", "answerId": "q1-b", "value": "I"}
    assert payload[-1] == {"questionId": "q15", "answerId": "q15-b", "value": "F"}


def test_submit_failure_then_dismiss(questions):
    state = test_slice.submit_started(_answer_all(_loaded(questions)))
    state = test_slice.submit_failed(state, "제출 실패", "TEST_SUBMIT_FAILED")

    assert test_slice.select_error(state) == "제출 실패"
    assert state.submit_request.code == "TEST_SUBMIT_FAILED"

    state = test_slice.clear_error(state)

    assert test_slice.select_error(state) is None
    assert state.submit_request == NOT_STARTED
    assert len(state.answers) == 15


def test_submit_success_stores_result(questions):
    state = test_slice.submit_started(_answer_all(_loaded(questions)))

    state = test_slice.submit_succeeded(state, _result())

    assert state.result.character == "joker"
    assert not test_slice.select_is_loading(state)


def test_reset_returns_to_clean_first_page_and_is_idempotent(questions):
    state = _answer_all(_loaded(questions))
    state = test_slice.next_page(test_slice.next_page(state))
    state = test_slice.submit_succeeded(test_slice.submit_started(state), _result())

    once = test_slice.reset_test(state)
    twice = test_slice.reset_test(once)

    assert once == twice
    assert once.current_page == 1
    assert once.answers == {}
    assert once.result is None
    assert once.submit_request == NOT_STARTED
    assert len(once.questions) == 15


def test_short_question_set_is_a_load_failure(questions):
    state = _loaded(questions[:14])

    assert state.questions == ()
    assert isinstance(state.questions_request, Failed)
    assert state.questions_request.code == "QUESTIONS_LOAD_FAILED"
    assert test_slice.select_error(state) == QUESTIONS_LOAD_FAILED_MESSAGE


def test_uneven_question_set_is_a_load_failure(questions):
    uneven = [replace(questions[0], dimension="NS")] + list(questions[1:])

    state = _loaded(uneven)

    assert state.questions == ()
    assert test_slice.select_error(state) == QUESTIONS_LOAD_FAILED_MESSAGE


def test_next_page_checks_every_question_on_page(questions):
    state = _loaded(questions)
    for number in range(1, 5):
        state = test_slice.set_answer(state, f"q{number}", f"q{number}-a")

    state = test_slice.next_page(state)

    assert state.current_page == 1
    assert state.validation_error == INCOMPLETE_ANSWERS_MESSAGE
