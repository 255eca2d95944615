"""
화면 구성 요소 (질문 카드, 진행 바, 캐릭터 결과, 에러 배너, 스피너)

각 함수는 안전하게 이스케이프된 Markup 을 반환하므로 페이지 템플릿에 그대로 넣을 수 있다.
"""
from flask import render_template_string
from markupsafe import Markup

from reports.content_data import PLACEHOLDER_IMAGE
from utils import COMMON_HEAD, PAGE_BACKGROUND

QUESTION_CARD_TEMPLATE = """
<section class="w-full max-w-3xl mx-auto px-4" id="question-{{ question.id }}">
    <h2 class="mb-8 text-xl sm:text-2xl font-semibold text-halloween-orange text-center leading-relaxed">{{ question.text }}</h2>
    <div class="space-y-4">
    {% for answer in question.answers %}
        {% set is_selected = answer.id == selected %}
        <button type="submit" name="answer" value="{{ answer.id }}"
                formaction="{{ url_for('test.answer', question_id=question.id) }}"
                aria-pressed="{{ 'true' if is_selected else 'false' }}"
                aria-label="{{ answer.text }}{{ ' (선택됨)' if is_selected }}"
                {% if disabled %}disabled{% endif %}
                class="answer-option w-full p-5 rounded-lg border-2 flex items-center justify-between text-lg transition-all duration-300
                       {{ 'selected bg-halloween-orange border-halloween-orange text-black shadow-lg' if is_selected else 'bg-black border-halloween-purple/50 text-white hover:border-halloween-purple hover:bg-halloween-purple/20' }}">
            <span class="text-left leading-relaxed flex-1 pr-4">{{ answer.text }}</span>
            {% if is_selected %}<span class="selection-marker font-bold text-2xl" aria-hidden="true">✓</span>{% endif %}
        </button>
    {% endfor %}
    </div>
</section>
"""

PROGRESS_BAR_TEMPLATE = """
<div class="w-full max-w-3xl mx-auto px-4 mb-10">
    <div class="flex justify-center items-center mb-4">
        <span class="text-3xl font-spooky text-halloween-orange" id="page-counter">{{ current }}<span class="text-halloween-purple mx-1">/</span>{{ total }}</span>
    </div>
    <div class="relative w-full h-4 bg-black border-2 border-halloween-purple/50 rounded-full overflow-hidden">
        <div class="absolute top-0 left-0 h-full rounded-full transition-all duration-500"
             style="width: {{ percent }}%; background: linear-gradient(to right, #6a0dad, #ff6b35, #8b0000);"
             role="progressbar" aria-valuenow="{{ current }}" aria-valuemin="1" aria-valuemax="{{ total }}"
             aria-label="진행률: {{ current }}/{{ total }} 페이지"></div>
    </div>
</div>
"""

CHARACTER_RESULT_TEMPLATE = """
<section class="max-w-4xl mx-auto px-4 text-center" id="character-result" data-character="{{ result.character }}">
    <p class="text-lg text-halloween-purple mb-2">당신의 할로윈 캐릭터는...</p>
    <h1 class="font-spooky text-6xl md:text-7xl text-halloween-orange mb-8 drop-shadow-[0_0_20px_rgba(255,107,53,0.5)]">{{ info.name }}</h1>
    <img src="{{ info.image_path or placeholder }}" alt="{{ info.name }}" class="mx-auto w-56 h-56 object-contain mb-8"
         onerror="this.onerror=null;this.src='{{ placeholder }}';"/>
    <div class="bg-halloween-dark/80 border-2 border-halloween-orange/30 rounded-xl p-8 mb-8">
        <p class="text-lg text-gray-200 leading-relaxed">{{ info.description }}</p>
    </div>
    <div class="flex flex-wrap justify-center gap-4">
        <form method="post" action="{{ url_for('result.retake') }}">
            <button type="submit" class="px-8 py-4 bg-halloween-orange text-halloween-darker font-bold text-lg rounded-lg hover:bg-halloween-blood transition-colors">다시 테스트하기 🔄</button>
        </form>
        {% if show_profile %}
        <a href="/profile" class="px-8 py-4 bg-halloween-purple/80 text-white font-bold text-lg rounded-lg border-2 border-halloween-purple hover:bg-halloween-purple transition-colors">내 프로필 보기</a>
        {% endif %}
    </div>
</section>
"""

ERROR_BANNER_TEMPLATE = """
<div class="error-banner flex items-start justify-between gap-4 bg-halloween-blood/20 border-2 border-halloween-blood/60 rounded-lg p-4 text-gray-100" role="alert">
    <p class="flex-1">⚠️ {{ message }}</p>
    {% if dismiss_action %}
    <form method="post" action="{{ dismiss_action }}">
        <button type="submit" class="text-gray-300 hover:text-white font-bold" aria-label="닫기">✕</button>
    </form>
    {% endif %}
</div>
"""

SPINNER_TEMPLATE = """
<div class="flex flex-col items-center justify-center gap-4" role="status">
    <div class="w-16 h-16 border-4 border-halloween-orange border-t-transparent rounded-full animate-spin"></div>
    {% if message %}<p class="text-xl text-halloween-purple">{{ message }}</p>{% endif %}
</div>
"""

LOADING_PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <meta http-equiv="refresh" content="{{ refresh }}"/>
    <title>잠시만 기다려주세요</title>
</head>
<body class="{{ background }} flex items-center justify-center">
    {{ spinner }}
</body>
</html>
"""


def question_card(question, selected=None, disabled=False):
    return Markup(render_template_string(
        QUESTION_CARD_TEMPLATE, question=question, selected=selected, disabled=disabled))


def progress_bar(current, total):
    total = max(total, 1)
    percent = round(current / total * 100)
    return Markup(render_template_string(
        PROGRESS_BAR_TEMPLATE, current=current, total=total, percent=percent))


def character_result(result, show_profile=False):
    return Markup(render_template_string(
        CHARACTER_RESULT_TEMPLATE,
        result=result,
        info=result.character_info,
        show_profile=show_profile,
        placeholder=PLACEHOLDER_IMAGE,
    ))


def error_banner(message, dismiss_action=None):
    if not message:
        return Markup('')
    return Markup(render_template_string(
        ERROR_BANNER_TEMPLATE, message=message, dismiss_action=dismiss_action))


def spinner(message=None):
    return Markup(render_template_string(SPINNER_TEMPLATE, message=message))


def loading_page(message='인증 상태를 확인하는 중...', refresh=1):
    """인증 확인이 끝날 때까지 보여주는 전체 화면 스피너 (자동 새로고침)"""
    return render_template_string(
        LOADING_PAGE_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        spinner=spinner(message),
        refresh=refresh,
    )
