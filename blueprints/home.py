"""
홈페이지 라우트
"""
from flask import Blueprint, current_app, render_template_string

from store.context import get_state
from utils import COMMON_HEAD, PAGE_BACKGROUND, get_header

home_bp = Blueprint('home', __name__)

HOME_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <title>할로윈 성격 테스트</title>
</head>
<body class="{{ background }} flex flex-col">
    {{ header }}
    <main class="flex-grow flex items-center justify-center px-4 py-8">
        <div class="max-w-4xl w-full text-center">
            <h1 class="font-spooky text-6xl md:text-8xl text-halloween-orange mb-6 animate-pulse">할로윈 성격 테스트</h1>
            <p class="text-xl md:text-2xl text-halloween-purple mb-8">당신은 어떤 할로윈 캐릭터일까요?</p>

            <div class="bg-halloween-dark/80 border-2 border-halloween-orange/30 rounded-lg p-8 mb-10 shadow-2xl">
                <p class="text-lg md:text-xl text-white leading-relaxed mb-4">15개의 질문을 통해 당신의 성격을 분석하고,</p>
                <p class="text-lg md:text-xl text-white leading-relaxed mb-4">8가지 할로윈 캐릭터 중 하나로 매칭해드립니다.</p>
                <p class="text-base md:text-lg text-halloween-green">🎃 {{ character_names }} 🎃</p>
            </div>

            <a id="start-test" href="{{ start_url }}"
               class="inline-flex items-center justify-center px-12 py-5 text-2xl font-bold text-halloween-darker bg-gradient-to-r from-halloween-orange to-halloween-blood rounded-full shadow-[0_0_30px_rgba(255,107,53,0.6)] hover:scale-105 transition-all duration-300">
                테스트 시작하기
            </a>

            <p class="text-sm text-gray-400 mt-8">소요 시간: 약 3-5분 | 총 15개 질문</p>
        </div>
    </main>
</body>
</html>
"""

CHARACTER_NAMES = '좀비, 조커, 해골, 수녀, 잭오랜턴, 뱀파이어, 유령, 프랑켄슈타인'


def start_url_for(email_auth, is_authenticated):
    """고급 모드에서 로그인하지 않았다면 이메일 인증부터"""
    if email_auth and not is_authenticated:
        return '/auth/email'
    return '/test'


@home_bp.route('/')
def index():
    """메인 랜딩 페이지"""
    features = current_app.features
    auth = get_state().auth
    return render_template_string(
        HOME_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        header=get_header('home', features.email_auth, auth.user),
        character_names=CHARACTER_NAMES,
        start_url=start_url_for(features.email_auth, auth.is_authenticated),
    )
