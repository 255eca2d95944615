"""
테스트 라우트 블루프린트
"""
import logging

from flask import Blueprint, current_app, redirect, render_template_string, request, url_for

from blueprints.guard import guarded
from components import error_banner, progress_bar, question_card, spinner
from error_messages import extract_error_message
from reports.scoring import ScoringError, calculate_result
from services import ApiError
from store import test_slice
from store.context import dispatch, get_state, get_test_service
from store.request_state import is_pending
from utils import COMMON_HEAD, PAGE_BACKGROUND, get_header
from validation import INCOMPLETE_ANSWERS_MESSAGE

logger = logging.getLogger(__name__)

test_bp = Blueprint('test', __name__)

TEST_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <title>할로윈 성격 테스트 - {{ current_page }}/{{ total_pages }}</title>
</head>
<body class="{{ background }}">
    {{ header }}
    <main class="py-8 px-4">
        <div class="max-w-4xl mx-auto">
            {{ progress }}

            <form method="post" action="{{ url_for('test.next_page') }}">
                <div class="space-y-12 mb-12">
                {% for card in cards %}
                    {{ card }}
                {% endfor %}
                </div>
            </form>

            {% if message %}
            <div class="max-w-3xl mx-auto mb-6 px-4">{{ error_banner(message, url_for('test.dismiss')) }}</div>
            {% endif %}

            <div class="max-w-3xl mx-auto px-4">
                <div class="flex justify-between items-center gap-4">
                {% if current_page > 1 %}
                    <form method="post" action="{{ url_for('test.prev_page') }}">
                        <button type="submit" id="prev-button" class="px-8 py-4 bg-halloween-purple/80 text-white font-bold text-lg rounded-lg border-2 border-halloween-purple hover:bg-halloween-purple transition-all">← 이전</button>
                    </form>
                {% else %}
                    <div class="w-32"></div>
                {% endif %}

                {% if not is_last_page %}
                    <form method="post" action="{{ url_for('test.next_page') }}">
                        <button type="submit" id="next-button" {% if not page_complete %}disabled{% endif %}
                                class="px-8 py-4 font-bold text-lg rounded-lg border-2 transition-all {{ 'bg-halloween-orange text-halloween-darker border-halloween-orange hover:bg-halloween-blood' if page_complete else 'bg-gray-600 text-gray-400 border-gray-600 cursor-not-allowed opacity-50' }}">다음 →</button>
                    </form>
                {% else %}
                    <form method="post" action="{{ url_for('test.submit') }}">
                        <button type="submit" id="submit-button" {% if not test_complete or is_loading %}disabled{% endif %}
                                class="px-8 py-4 font-bold text-lg rounded-lg border-2 transition-all {{ 'bg-gradient-to-r from-halloween-orange to-halloween-blood text-halloween-darker border-halloween-orange' if test_complete and not is_loading else 'bg-gray-600 text-gray-400 border-gray-600 cursor-not-allowed opacity-50' }}">
                            {{ '제출 중...' if is_loading else '결과 보기 🎃' }}
                        </button>
                    </form>
                {% endif %}
                </div>
            </div>
        </div>
    </main>
</body>
</html>
"""

STATUS_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    {% if refresh %}<meta http-equiv="refresh" content="{{ refresh }}"/>{% endif %}
    <title>할로윈 성격 테스트</title>
</head>
<body class="{{ background }} flex items-center justify-center px-4">
    {% if error %}
    <div class="max-w-md w-full bg-halloween-dark/80 border-2 border-halloween-blood/50 rounded-lg p-8 text-center">
        <p id="load-error" class="text-xl text-halloween-blood mb-6">{{ error }}</p>
        <div class="flex justify-center gap-4">
            <form method="post" action="{{ url_for('test.dismiss') }}">
                <button type="submit" class="px-6 py-3 bg-halloween-purple text-white font-bold rounded-lg">다시 시도</button>
            </form>
            <a href="/" class="px-6 py-3 bg-halloween-orange text-halloween-darker font-bold rounded-lg hover:bg-halloween-blood transition-colors">홈으로 돌아가기</a>
        </div>
    </div>
    {% else %}
    {{ spinner }}
    {% endif %}
</body>
</html>
"""


def _load_questions():
    """질문이 없으면 백엔드에서 불러와 상태에 반영"""
    dispatch('test', test_slice.load_started)
    try:
        questions = get_test_service().get_questions()
    except ApiError as e:
        logger.warning("Question load failed: %s", e.code)
        return dispatch('test', test_slice.load_failed, extract_error_message(e), e.code)
    state = dispatch('test', test_slice.set_questions, questions)
    if test_slice.select_error(state.test):
        logger.warning("Rejected a set of %d questions", len(questions))
    return state


def _check_local_score(state, result):
    """백엔드가 돌려준 유형과 로컬 집계가 다르면 경고만 남긴다"""
    pairs = []
    for question in state.questions:
        answer = question.find_answer(state.answers.get(question.id))
        if answer is not None:
            pairs.append((question.dimension, answer.value))
    try:
        local = calculate_result(pairs)
    except ScoringError as e:
        logger.debug("Skipping local score check: %s", e)
        return
    if (local.mbti_type, local.character) != (result.mbti_type, result.character):
        logger.warning("Backend result %s (%s) differs from local tally %s (%s)",
                       result.character, result.mbti_type, local.character, local.mbti_type)


def _render_status(error=None, message=None, refresh=None):
    return render_template_string(
        STATUS_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        error=error,
        spinner=spinner(message),
        refresh=refresh,
    )


@test_bp.route('/test')
@guarded(require_auth=True)
def test():
    """테스트 페이지"""
    app_state = get_state()
    state = app_state.test
    if test_slice.select_needs_questions(state) and not test_slice.select_error(state):
        state = _load_questions().test

    if not state.questions:
        if is_pending(state.questions_request):
            return _render_status(message='질문을 불러오는 중...', refresh=1)
        return _render_status(error=test_slice.select_error(state))

    cards = [
        question_card(q, state.answers.get(q.id), disabled=test_slice.select_is_loading(state))
        for q in test_slice.select_current_page_questions(state)
    ]

    return render_template_string(
        TEST_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        header=get_header('test', current_app.features.email_auth, app_state.auth.user),
        progress=progress_bar(state.current_page, test_slice.select_total_pages(state)),
        cards=cards,
        current_page=state.current_page,
        total_pages=test_slice.select_total_pages(state),
        is_last_page=test_slice.select_is_last_page(state),
        page_complete=test_slice.select_is_current_page_complete(state),
        test_complete=test_slice.select_is_test_complete(state),
        is_loading=test_slice.select_is_loading(state),
        message=state.validation_error or test_slice.select_error(state),
        error_banner=error_banner,
    )


@test_bp.route('/test/answer/<question_id>', methods=['POST'])
@guarded(require_auth=True)
def answer(question_id):
    answer_id = request.form.get('answer', '')
    dispatch('test', test_slice.set_answer, question_id, answer_id)
    return redirect(url_for('test.test') + f'#question-{question_id}')


@test_bp.route('/test/next', methods=['POST'])
@guarded(require_auth=True)
def next_page():
    dispatch('test', test_slice.next_page)
    return redirect(url_for('test.test'))


@test_bp.route('/test/prev', methods=['POST'])
@guarded(require_auth=True)
def prev_page():
    dispatch('test', test_slice.prev_page)
    return redirect(url_for('test.test'))


@test_bp.route('/test/dismiss', methods=['POST'])
@guarded(require_auth=True)
def dismiss():
    dispatch('test', test_slice.clear_error)
    return redirect(url_for('test.test'))


@test_bp.route('/test/submit', methods=['POST'])
@guarded(require_auth=True)
def submit():
    """답변 제출 -> 결과 페이지"""
    state = get_state().test

    if is_pending(state.submit_request):
        # 이미 제출 중
        return redirect(url_for('test.test'))

    if not test_slice.select_can_submit(state):
        dispatch('test', test_slice.set_validation_error, INCOMPLETE_ANSWERS_MESSAGE)
        return redirect(url_for('test.test'))

    state = dispatch('test', test_slice.submit_started).test
    try:
        result = get_test_service().submit_test(test_slice.select_answers_for_submission(state))
    except ApiError as e:
        logger.warning("Test submit failed: %s", e.to_dict())
        dispatch('test', test_slice.submit_failed, extract_error_message(e), e.code)
        return redirect(url_for('test.test'))

    _check_local_score(state, result)
    dispatch('test', test_slice.submit_succeeded, result)
    logger.info("Test submitted: %s (%s)", result.character, result.mbti_type)
    return redirect(url_for('result.results'))
