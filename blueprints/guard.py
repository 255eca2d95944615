"""
라우트 가드: 기능 플래그 + 인증 상태 + 테스트 완료 여부로 접근을 결정
"""
import enum
from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import current_app, redirect

from components import loading_page
from store.context import store_view

EMAIL_ENTRY_PATH = '/auth/email'
TEST_PATH = '/test'


class Decision(enum.Enum):
    RENDER = 'render'
    REDIRECT = 'redirect'
    LOADING = 'loading'


@dataclass(frozen=True)
class GuardDecision:
    kind: Decision
    path: Optional[str] = None

    @classmethod
    def render(cls):
        return cls(Decision.RENDER)

    @classmethod
    def redirect_to(cls, path):
        return cls(Decision.REDIRECT, path)

    @classmethod
    def loading(cls):
        return cls(Decision.LOADING)


def decide_route(email_auth, require_auth, require_test_completion,
                 is_authenticated, auth_loading, has_result):
    """순수 함수. 규칙은 위에서부터 순서대로 적용된다."""
    # 플래그가 꺼져 있으면 인증 요구는 무시
    auth_required = bool(email_auth and require_auth)

    if require_test_completion and not has_result:
        return GuardDecision.redirect_to(TEST_PATH)

    if auth_required and not is_authenticated:
        return GuardDecision.redirect_to(EMAIL_ENTRY_PATH)

    if auth_loading:
        return GuardDecision.loading()

    return GuardDecision.render()


def guarded(require_auth=True, require_test_completion=False):
    """뷰 데코레이터. current_app.features 와 상태 파사드로 decide_route 를 호출"""
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            view_state = store_view()
            decision = decide_route(
                email_auth=current_app.features.email_auth,
                require_auth=require_auth,
                require_test_completion=require_test_completion,
                is_authenticated=view_state.is_authenticated,
                auth_loading=view_state.auth_loading,
                has_result=view_state.has_result,
            )
            if decision.kind is Decision.REDIRECT:
                return redirect(decision.path)
            if decision.kind is Decision.LOADING:
                return loading_page()
            return view(*args, **kwargs)
        return wrapper
    return decorator
