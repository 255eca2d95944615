"""
프로필 / 테스트 기록 라우트 (고급 모드 전용)
"""
import logging

from flask import Blueprint, redirect, render_template_string

from blueprints.guard import EMAIL_ENTRY_PATH, guarded
from components import error_banner
from error_messages import extract_error_message
from reports.content_data import PLACEHOLDER_IMAGE, get_character_info
from services import ApiError
from store import auth_slice
from store.context import dispatch, get_auth_service, get_state
from utils import COMMON_HEAD, PAGE_BACKGROUND, get_header

logger = logging.getLogger(__name__)

profile_bp = Blueprint('profile', __name__)

PROFILE_LOAD_FAILED_MESSAGE = '프로필 정보를 불러오는데 실패했습니다.'

PROFILE_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <title>내 프로필</title>
</head>
<body class="{{ background }}">
    {{ header }}
    <main class="py-8 px-4">
        <div class="max-w-6xl mx-auto">
            <div class="mb-8 text-center">
                <h1 class="text-5xl md:text-6xl font-spooky text-halloween-orange mb-4">내 프로필 👤</h1>
                <p class="text-gray-400 text-lg">당신의 할로윈 성격 테스트 기록</p>
            </div>

            {% if error %}
            <div class="max-w-md mx-auto mb-8">
                {{ error_banner(error) }}
                <div class="text-center mt-4"><a href="/" class="px-6 py-3 bg-halloween-orange text-white font-semibold rounded-lg">홈으로 돌아가기</a></div>
            </div>
            {% endif %}

            <div class="bg-halloween-dark/60 border-2 border-halloween-purple/30 rounded-xl p-8 mb-8">
                <div class="flex flex-col sm:flex-row sm:items-center sm:justify-between gap-4">
                    <div>
                        <h2 class="text-2xl font-spooky text-halloween-purple mb-2">사용자 정보</h2>
                        <p class="text-gray-300 text-lg mb-1"><span class="text-halloween-orange">이메일:</span> <span id="user-email">{{ user.email }}</span></p>
                        <p class="text-gray-400 text-sm">가입일: {{ format_date(user.created_at) }}</p>
                    </div>
                    <form method="post" action="/auth/logout">
                        <button type="submit" class="px-6 py-3 bg-halloween-blood hover:bg-halloween-blood/80 text-white font-semibold rounded-lg whitespace-nowrap">로그아웃</button>
                    </form>
                </div>
            </div>

            <div class="bg-halloween-dark/60 border-2 border-halloween-purple/30 rounded-xl p-8">
                <div class="flex flex-col sm:flex-row sm:items-center sm:justify-between gap-4 mb-6">
                    <h2 class="text-3xl font-spooky text-halloween-orange">테스트 기록 📜</h2>
                    <a href="/test" class="px-6 py-3 bg-halloween-orange text-white font-semibold rounded-lg whitespace-nowrap">새 테스트 하기 🎃</a>
                </div>

                {% if not history %}
                <div id="empty-history" class="text-center py-12">
                    <div class="text-6xl mb-4">👻</div>
                    <h3 class="text-2xl font-spooky text-halloween-purple mb-2">아직 테스트 기록이 없습니다</h3>
                    <p class="text-gray-400 mb-6">첫 번째 할로윈 성격 테스트를 시작해보세요!</p>
                    <a href="/test" class="px-8 py-4 bg-halloween-purple text-white font-semibold text-lg rounded-lg">테스트 시작하기</a>
                </div>
                {% else %}
                <div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6">
                    {% for entry in history %}
                    <div class="history-entry bg-halloween-darker/50 border-2 border-halloween-purple/20 rounded-lg p-6" data-character="{{ entry.result.character_type }}">
                        <img src="{{ entry.info.image_path if entry.info else placeholder }}" alt="{{ entry.info.name if entry.info else entry.result.character_type }}"
                             class="mx-auto w-32 h-32 object-contain mb-4" onerror="this.onerror=null;this.src='{{ placeholder }}';"/>
                        <h3 class="text-2xl font-spooky text-halloween-orange text-center mb-2">{{ entry.info.name if entry.info else entry.result.character_type }}</h3>
                        <p class="text-gray-400 text-sm text-center mb-4">{{ format_date(entry.result.completed_at) }}</p>
                        {% if entry.info %}<p class="text-gray-300 text-sm leading-relaxed">{{ entry.info.description }}</p>{% endif %}
                        <p class="mt-4 pt-4 border-t border-halloween-purple/20 text-gray-500 text-xs text-center">테스트 ID: {{ entry.result.id[:8] }}...</p>
                    </div>
                    {% endfor %}
                </div>
                {% endif %}
            </div>

            <p class="mt-8 text-center text-gray-400 text-sm">모든 테스트 기록은 안전하게 저장됩니다 🔒</p>
        </div>
    </main>
</body>
</html>
"""


def format_date(value):
    """2024년 10월 31일 오후 09:05 형식"""
    if value is None:
        return '-'
    meridiem = '오전' if value.hour < 12 else '오후'
    hour = value.hour % 12 or 12
    return f'{value.year}년 {value.month}월 {value.day}일 {meridiem} {hour:02d}:{value.minute:02d}'


def _refresh_user(service):
    """/profile/me 로 세션을 확인. 401 이면 None (로그아웃 처리)"""
    dispatch('auth', auth_slice.check_auth_started)
    try:
        user = service.get_profile()
    except ApiError as e:
        previous = get_state().auth.user
        if e.status_code == 401 or previous is None:
            dispatch('auth', auth_slice.check_auth_failed)
            return None
        # 일시적인 오류: 기존 사용자 정보를 유지
        dispatch('auth', auth_slice.set_user, previous)
        raise
    dispatch('auth', auth_slice.check_auth_succeeded, user)
    return user


@profile_bp.route('/profile')
@guarded(require_auth=True)
def profile():
    """내 정보 + 테스트 기록"""
    service = get_auth_service()
    error = None
    history = []

    try:
        user = _refresh_user(service)
        if user is None:
            return redirect(EMAIL_ENTRY_PATH)
        history = service.get_history()
    except ApiError as e:
        logger.warning("Profile load failed: %s", e.code)
        error = extract_error_message(e) or PROFILE_LOAD_FAILED_MESSAGE
        user = get_state().auth.user

    entries = [{'result': r, 'info': get_character_info(r.character_type)} for r in history]

    return render_template_string(
        PROFILE_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        header=get_header('profile', True, user),
        user=user,
        history=entries,
        error=error,
        error_banner=error_banner,
        format_date=format_date,
        placeholder=PLACEHOLDER_IMAGE,
    )
