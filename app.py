"""
Flask 애플리케이션 초기화 및 설정
"""
import logging
import secrets

from flask import Flask, redirect, render_template_string, session
from werkzeug.exceptions import HTTPException

from blueprints import auth_bp, home_bp, profile_bp, result_bp, test_bp
from config import Features, get_config
from services import ApiClient
from store import StateStore
from utils import COMMON_HEAD, PAGE_BACKGROUND

logger = logging.getLogger(__name__)

ERROR_PAGE_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <title>오류 발생</title>
</head>
<body class="{{ background }} flex items-center justify-center px-4">
    <div id="error-boundary" class="max-w-md w-full bg-halloween-dark/80 border-2 border-halloween-blood/50 rounded-lg p-8 text-center">
        <h1 class="font-spooky text-5xl text-halloween-blood mb-4">오류 발생!</h1>
        <p class="text-lg text-gray-300 mb-8">예상치 못한 오류가 발생했습니다.</p>
        <a href="/" class="px-8 py-4 bg-halloween-orange text-halloween-darker font-bold rounded-lg hover:bg-halloween-blood transition-colors">홈으로 돌아가기</a>
    </div>
</body>
</html>
"""


def create_app(config=None, session_factory=None):
    """
    앱 팩토리

    config: 설정 클래스 (기본값은 FLASK_ENV 기준 get_config())
    session_factory: 방문자별 requests.Session 을 만드는 함수 (테스트에서 가짜 백엔드 주입용)
    """
    app = Flask(__name__)
    app.config.from_object(config or get_config())
    # 세션 데이터를 암호화하기 위한 시크릿 키 설정
    app.secret_key = app.config['SECRET_KEY']

    logging.basicConfig(
        level=logging.DEBUG if app.config.get('DEBUG') else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app.features = Features.from_config(app.config)

    def make_client():
        return ApiClient(
            app.config['API_URL'],
            timeout=app.config['API_TIMEOUT'],
            session=session_factory() if session_factory else None,
        )

    app.state_store = StateStore(make_client)

    _register_blueprints(app)
    _register_handlers(app)

    logger.info("App ready (email auth: %s, api: %s)",
                'on' if app.features.email_auth else 'off', app.config['API_URL'])
    return app


def _register_blueprints(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(test_bp)
    app.register_blueprint(result_bp)

    # 고급 모드에서만 인증 관련 라우트를 노출
    if app.features.email_auth:
        app.register_blueprint(auth_bp)
        app.register_blueprint(profile_bp)


def _register_handlers(app):
    # 서버가 재시작되면 인메모리 상태가 사라지므로 기존 방문자 세션도 초기화
    server_nonce = secrets.token_hex(16)

    @app.before_request
    def _reset_session_on_restart():
        if session.get('_server_nonce') != server_nonce:
            session.clear()
            session['_server_nonce'] = server_nonce

    @app.errorhandler(404)
    def _not_found(error):
        # 알 수 없는 경로는 홈으로
        return redirect('/')

    @app.errorhandler(Exception)
    def _unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error while rendering a page")
        return render_template_string(
            ERROR_PAGE_TEMPLATE,
            common_head=COMMON_HEAD,
            background=PAGE_BACKGROUND,
        ), 500
