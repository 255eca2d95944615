"""
이메일 인증 라우트 (고급 모드 전용)
"""
import logging

from flask import Blueprint, current_app, redirect, render_template_string, request

from components import error_banner, spinner
from error_messages import extract_error_message
from services import ApiError
from store import auth_slice
from store.context import dispatch, get_auth_service, get_state
from utils import COMMON_HEAD, PAGE_BACKGROUND, get_header
from validation import validate_email

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

SEND_SUCCESS_MESSAGE = '인증 이메일이 전송되었습니다. 이메일을 확인해주세요.'
MISSING_TOKEN_MESSAGE = '인증 토큰이 없습니다.'
VERIFY_FAILED_MESSAGE = '인증에 실패했습니다. 토큰이 유효하지 않거나 만료되었습니다.'

EMAIL_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <title>이메일 인증</title>
</head>
<body class="{{ background }} flex flex-col">
    {{ header }}
    <main class="flex-grow flex items-center justify-center px-4 py-8">
        <div class="max-w-2xl w-full">
            <div class="text-center mb-8">
                <h1 class="font-spooky text-5xl md:text-7xl text-halloween-orange mb-4">이메일 인증</h1>
                <p class="text-lg md:text-xl text-halloween-purple">테스트 결과를 저장하고 나중에 확인하세요</p>
            </div>

            <div class="bg-halloween-dark/80 border-2 border-halloween-orange/30 rounded-lg p-8 md:p-12 shadow-2xl">
                {% if sent %}
                <div id="send-success" class="text-center">
                    <p class="text-xl text-halloween-green mb-4">✉️ {{ success_message }}</p>
                    <p class="text-sm text-gray-400">이메일이 도착하지 않았나요? 스팸 폴더를 확인해주세요.</p>
                </div>
                {% else %}
                <form method="post" action="/auth/email" class="flex flex-col gap-4" novalidate>
                    <label for="email" class="text-gray-200">이메일 주소</label>
                    <input id="email" name="email" type="email" value="{{ email }}" placeholder="example@email.com"
                           class="w-full px-4 py-3 rounded-lg bg-black border-2 {{ 'border-halloween-blood' if error else 'border-halloween-purple/50' }} text-white focus:border-halloween-orange"/>
                    {% if error %}{{ error_banner(error) }}{% endif %}
                    <button type="submit" class="px-8 py-4 bg-halloween-orange text-halloween-darker font-bold text-lg rounded-lg hover:bg-halloween-blood transition-colors">인증 이메일 받기</button>
                </form>
                <p class="mt-6 text-center text-sm text-gray-400">이메일로 전송된 인증 링크를 클릭하면 테스트를 시작할 수 있습니다.</p>
                {% endif %}
            </div>

            <p class="mt-8 text-center text-xs text-gray-500">인증 링크는 24시간 동안 유효합니다</p>
        </div>
    </main>
</body>
</html>
"""

VERIFY_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    {% if not error %}<meta http-equiv="refresh" content="{{ delay }};url=/test"/>{% endif %}
    <title>이메일 인증</title>
</head>
<body class="{{ background }} flex items-center justify-center px-4 py-8">
    <div class="max-w-2xl w-full bg-halloween-dark/80 border-2 border-halloween-orange/30 rounded-lg p-8 md:p-12 shadow-2xl text-center">
        {% if error %}
        <h2 class="font-spooky text-4xl text-halloween-blood mb-4">인증 실패</h2>
        <p id="verify-error" class="text-lg text-gray-300 mb-6">{{ error }}</p>
        <a id="resend-link" href="/auth/email" class="inline-block px-8 py-3 bg-halloween-orange text-white rounded-lg hover:bg-halloween-orange/80">다시 인증 이메일 받기</a>
        <p class="text-sm text-gray-500 mt-4">인증 링크는 24시간 동안 유효합니다</p>
        {% else %}
        <h2 id="verify-success" class="font-spooky text-4xl text-halloween-green mb-4">인증 완료!</h2>
        <p class="text-lg text-gray-300 mb-6">테스트 페이지로 이동합니다...</p>
        {{ spinner }}
        {% endif %}
    </div>
</body>
</html>
"""


def _render_email_page(email='', error=None, sent=False):
    return render_template_string(
        EMAIL_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        header=get_header('email', True, get_state().auth.user),
        email=email,
        error=error,
        sent=sent,
        success_message=SEND_SUCCESS_MESSAGE,
        error_banner=error_banner,
    )


@auth_bp.route('/email', methods=['GET', 'POST'])
def email_entry():
    """이메일 입력 -> 인증 링크 요청"""
    if request.method == 'GET':
        return _render_email_page()

    email = (request.form.get('email') or '').strip()
    validation = validate_email(email)
    if not validation.is_valid:
        # 네트워크 호출 없이 로컬에서 차단
        return _render_email_page(email=email, error=validation.error), 400

    try:
        get_auth_service().send_verification(email)
    except ApiError as e:
        logger.warning("send-verification failed: %s", e.code)
        return _render_email_page(email=email, error=extract_error_message(e)), (502 if e.status_code == 0 else 400)

    logger.info("Verification email requested")
    return _render_email_page(email=email, sent=True)


@auth_bp.route('/verify')
def verify():
    """이메일 링크의 token 으로 로그인"""
    token = (request.args.get('token') or '').strip()
    error = None

    if not token:
        error = MISSING_TOKEN_MESSAGE
    else:
        dispatch('auth', auth_slice.login_started)
        try:
            user = get_auth_service().verify_token(token)
        except ApiError as e:
            error = e.message or VERIFY_FAILED_MESSAGE
            dispatch('auth', auth_slice.login_failed, error, e.code)
        else:
            dispatch('auth', auth_slice.login_succeeded, user)
            logger.info("User %s verified", user.id)

    return render_template_string(
        VERIFY_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        error=error,
        delay=current_app.config.get('VERIFY_REDIRECT_DELAY', 1),
        spinner=spinner(),
    )


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """백엔드 로그아웃이 실패해도 로컬 인증 상태는 지운다"""
    dispatch('auth', auth_slice.logout_started)
    try:
        get_auth_service().logout()
    except ApiError as e:
        logger.warning("Backend logout failed: %s", e.code)
    finally:
        dispatch('auth', auth_slice.logout_finished)
    return redirect('/')
