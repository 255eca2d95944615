from models import User
from store import auth_slice
from store.request_state import Failed

GHOST = User(id="user-1", email="ghost@example.com")


def test_login_flow():
    state = auth_slice.login_started(auth_slice.INITIAL_STATE)
    assert auth_slice.select_auth_loading(state)
    assert not auth_slice.select_is_authenticated(state)

    state = auth_slice.login_succeeded(state, GHOST)

    assert auth_slice.select_is_authenticated(state)
    assert auth_slice.select_user(state) == GHOST
    assert not auth_slice.select_auth_loading(state)
    assert auth_slice.select_auth_error(state) is None


def test_login_failure_has_default_message():
    state = auth_slice.login_failed(auth_slice.login_started(auth_slice.INITIAL_STATE))

    assert not auth_slice.select_is_authenticated(state)
    assert auth_slice.select_auth_error(state) == auth_slice.LOGIN_FAILED_MESSAGE


def test_login_failure_keeps_server_message_and_code():
    state = auth_slice.login_failed(auth_slice.INITIAL_STATE, "만료된 링크", "TOKEN_EXPIRED")

    assert isinstance(state.request, Failed)
    assert state.request.code == "TOKEN_EXPIRED"
    assert auth_slice.select_auth_error(state) == "만료된 링크"


def test_failed_session_check_is_silent():
    state = auth_slice.check_auth_started(auth_slice.login_succeeded(auth_slice.INITIAL_STATE, GHOST))

    state = auth_slice.check_auth_failed(state)

    assert state == auth_slice.INITIAL_STATE
    assert auth_slice.select_auth_error(state) is None


def test_logout_clears_user():
    state = auth_slice.logout_started(auth_slice.login_succeeded(auth_slice.INITIAL_STATE, GHOST))
    assert auth_slice.select_auth_loading(state)

    state = auth_slice.logout_finished(state)

    assert state == auth_slice.INITIAL_STATE


def test_clear_error_only_touches_failures():
    failed = auth_slice.login_failed(auth_slice.INITIAL_STATE, "실패")
    assert auth_slice.select_auth_error(auth_slice.clear_error(failed)) is None

    pending = auth_slice.login_started(auth_slice.INITIAL_STATE)
    assert auth_slice.clear_error(pending) is pending


def test_set_user_and_clear_auth():
    state = auth_slice.set_user(auth_slice.INITIAL_STATE, GHOST)
    assert auth_slice.select_is_authenticated(state)

    assert auth_slice.clear_auth(state) == auth_slice.INITIAL_STATE
