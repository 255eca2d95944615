import pytest

from blueprints.guard import EMAIL_ENTRY_PATH, TEST_PATH, Decision, GuardDecision, decide_route


def _decide(**overrides):
    params = dict(
        email_auth=True,
        require_auth=True,
        require_test_completion=False,
        is_authenticated=False,
        auth_loading=False,
        has_result=False,
    )
    params.update(overrides)
    return decide_route(**params)


def test_flag_off_ignores_auth_requirement():
    assert _decide(email_auth=False) == GuardDecision.render()


def test_flag_on_anonymous_goes_to_email_entry():
    decision = _decide()

    assert decision.kind is Decision.REDIRECT
    assert decision.path == EMAIL_ENTRY_PATH


def test_flag_on_authenticated_renders():
    assert _decide(is_authenticated=True) == GuardDecision.render()


def test_route_without_auth_requirement_renders_for_anonymous():
    assert _decide(require_auth=False) == GuardDecision.render()


@pytest.mark.parametrize("email_auth", [True, False])
def test_missing_result_sends_back_to_test(email_auth):
    decision = _decide(
        email_auth=email_auth,
        require_auth=False,
        require_test_completion=True,
        is_authenticated=True,
    )

    assert decision == GuardDecision.redirect_to(TEST_PATH)


def test_result_check_comes_before_auth_check():
    decision = _decide(require_test_completion=True)

    assert decision.path == TEST_PATH


def test_loading_shows_spinner():
    assert _decide(is_authenticated=True, auth_loading=True).kind is Decision.LOADING
    assert _decide(email_auth=False, auth_loading=True).kind is Decision.LOADING


def test_completed_test_renders_results():
    decision = _decide(require_auth=False, require_test_completion=True, has_result=True)

    assert decision.kind is Decision.RENDER
