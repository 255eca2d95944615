"""
인증 상태 (사용자, 로그인 여부)
"""
from dataclasses import dataclass, replace
from typing import Optional

from models import User
from store.request_state import NOT_STARTED, PENDING, Failed, RequestState, Succeeded, error_of, is_pending

LOGIN_FAILED_MESSAGE = '인증에 실패했습니다.'


@dataclass(frozen=True)
class AuthState:
    user: Optional[User] = None
    is_authenticated: bool = False
    request: RequestState = NOT_STARTED


INITIAL_STATE = AuthState()


def select_is_authenticated(state):
    return state.is_authenticated


def select_user(state):
    return state.user


def select_auth_loading(state):
    return is_pending(state.request)


def select_auth_error(state):
    return error_of(state.request)


def _authenticated(user):
    return AuthState(user=user, is_authenticated=True, request=Succeeded(user.id))


# 토큰 검증 (로그인)
def login_started(state):
    return replace(state, request=PENDING)


def login_succeeded(state, user):
    return _authenticated(user)


def login_failed(state, message=None, code=None):
    return AuthState(request=Failed(message or LOGIN_FAILED_MESSAGE, code))


# 기존 세션 확인 (/profile/me). 실패해도 에러는 보여주지 않는다.
def check_auth_started(state):
    return replace(state, request=PENDING)


def check_auth_succeeded(state, user):
    return _authenticated(user)


def check_auth_failed(state):
    return INITIAL_STATE


# 로그아웃: 백엔드 호출 결과와 관계없이 로컬 상태는 지운다
def logout_started(state):
    return replace(state, request=PENDING)


def logout_finished(state):
    return INITIAL_STATE


def set_user(state, user):
    return _authenticated(user)


def clear_auth(state):
    return INITIAL_STATE


def clear_error(state):
    if isinstance(state.request, Failed):
        return replace(state, request=NOT_STARTED)
    return state
