"""
결과 라우트 블루프린트
"""
from urllib.parse import quote

from flask import Blueprint, current_app, redirect, render_template_string, request, url_for

from blueprints.guard import guarded
from components import character_result
from store import test_slice
from store.context import dispatch, get_state
from utils import COMMON_HEAD, PAGE_BACKGROUND, get_header

result_bp = Blueprint('result', __name__)

RESULT_TEMPLATE = """
<!DOCTYPE html>
<html lang="ko">
<head>
    {{ common_head }}
    <title>나의 할로윈 캐릭터: {{ result.character_info.name }}</title>
</head>
<body class="{{ background }}">
    {{ header }}
    <main class="py-8 px-4">
        <div class="max-w-6xl mx-auto">
            {{ panel }}

            <div class="mt-12 max-w-4xl mx-auto px-4">
                <div class="bg-halloween-dark/60 border-2 border-halloween-purple/30 rounded-xl p-8">
                    <h3 class="text-3xl font-spooky text-halloween-orange text-center mb-6">결과 공유하기 👻</h3>
                    <div class="flex flex-wrap justify-center gap-4">
                        <a href="{{ share.twitter }}" target="_blank" rel="noopener" aria-label="트위터에 공유하기"
                           class="px-6 py-3 bg-[#1DA1F2] hover:bg-[#1a8cd8] text-white font-semibold rounded-lg">트위터</a>
                        <a href="{{ share.facebook }}" target="_blank" rel="noopener" aria-label="페이스북에 공유하기"
                           class="px-6 py-3 bg-[#4267B2] hover:bg-[#365899] text-white font-semibold rounded-lg">페이스북</a>
                    </div>
                    <p class="text-center text-gray-400 text-sm mt-6">친구들과 함께 할로윈 성격 테스트를 즐겨보세요! 🎃</p>
                </div>
            </div>

            <p class="mt-8 text-center text-gray-400 text-sm">이 테스트는 MBTI 기반 할로윈 캐릭터 매칭 시스템입니다</p>
        </div>
    </main>
</body>
</html>
"""


def share_links(character_name, share_url):
    text = f'나의 할로윈 캐릭터는 {character_name}! 🎃'
    return {
        'twitter': f'https://twitter.com/intent/tweet?text={quote(text)}&url={quote(share_url, safe="")}',
        'facebook': f'https://www.facebook.com/sharer/sharer.php?u={quote(share_url, safe="")}&quote={quote(text)}',
    }


@result_bp.route('/results')
@guarded(require_auth=False, require_test_completion=True)
def results():
    """결과 페이지"""
    app_state = get_state()
    result = app_state.test.result
    email_auth = current_app.features.email_auth

    return render_template_string(
        RESULT_TEMPLATE,
        common_head=COMMON_HEAD,
        background=PAGE_BACKGROUND,
        header=get_header('results', email_auth, app_state.auth.user),
        result=result,
        panel=character_result(result, show_profile=email_auth),
        share=share_links(result.character_info.name, request.host_url),
    )


@result_bp.route('/results/retake', methods=['POST'])
def retake():
    """다시 하기: 결과와 답변을 지우고 1페이지로"""
    dispatch('test', test_slice.reset_test)
    return redirect(url_for('test.test'))
