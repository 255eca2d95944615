"""
요청 컨텍스트에서 현재 방문자의 상태/서비스에 접근하는 헬퍼
"""
import uuid

from flask import current_app, session

from services import AuthService, TestService
from store.store import StoreView

VISITOR_KEY = 'visitor_id'


def visitor_id():
    vid = session.get(VISITOR_KEY)
    if not vid:
        vid = uuid.uuid4().hex
        session[VISITOR_KEY] = vid
    return vid


def get_state():
    return current_app.state_store.get_state(visitor_id())


def dispatch(slice_name, reducer, *args, **kwargs):
    return current_app.state_store.dispatch(visitor_id(), slice_name, reducer, *args, **kwargs)


def store_view():
    return StoreView(get_state())


def get_api_client():
    return current_app.state_store.get_client(visitor_id())


def get_test_service():
    return TestService(get_api_client())


def get_auth_service():
    return AuthService(get_api_client())
