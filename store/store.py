"""
방문자별 인메모리 상태 저장소
"""
import logging
import threading
import time
from dataclasses import dataclass, field, replace

from store.auth_slice import AuthState, select_auth_loading
from store.test_slice import TestState

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT = 6 * 60 * 60


@dataclass(frozen=True)
class AppState:
    test: TestState = field(default_factory=TestState)
    auth: AuthState = field(default_factory=AuthState)


class StoreView:
    """가드가 필요로 하는 값만 노출하는 읽기 전용 파사드"""

    def __init__(self, state: AppState):
        self._state = state

    @property
    def is_authenticated(self):
        return self._state.auth.is_authenticated

    @property
    def auth_loading(self):
        return select_auth_loading(self._state.auth)

    @property
    def has_result(self):
        return self._state.test.result is not None


class _Visitor:
    __slots__ = ('state', 'client', 'last_seen')

    def __init__(self, client):
        self.state = AppState()
        self.client = client
        self.last_seen = time.monotonic()


class StateStore:
    """
    visitor id -> (AppState, ApiClient)

    상태 변경은 lock 안에서 reducer 를 적용하는 방식으로만 일어난다.
    """

    def __init__(self, client_factory, idle_timeout=DEFAULT_IDLE_TIMEOUT):
        self._client_factory = client_factory
        self._idle_timeout = idle_timeout
        self._visitors = {}
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._visitors)

    def _visitor(self, visitor_id):
        visitor = self._visitors.get(visitor_id)
        if visitor is None:
            self._prune_locked()
            visitor = _Visitor(self._client_factory())
            self._visitors[visitor_id] = visitor
            logger.debug("New visitor state %s (total %d)", visitor_id, len(self._visitors))
        visitor.last_seen = time.monotonic()
        return visitor

    def _prune_locked(self):
        cutoff = time.monotonic() - self._idle_timeout
        stale = [vid for vid, v in self._visitors.items() if v.last_seen < cutoff]
        for vid in stale:
            self._visitors.pop(vid).client.close()
        if stale:
            logger.info("Pruned %d idle visitor states", len(stale))

    def get_state(self, visitor_id) -> AppState:
        with self._lock:
            return self._visitor(visitor_id).state

    def get_client(self, visitor_id):
        with self._lock:
            return self._visitor(visitor_id).client

    def dispatch(self, visitor_id, slice_name, reducer, *args, **kwargs) -> AppState:
        """reducer(slice_state, *args) 를 적용하고 새 AppState 를 반환"""
        with self._lock:
            visitor = self._visitor(visitor_id)
            current = getattr(visitor.state, slice_name)
            visitor.state = replace(visitor.state, **{slice_name: reducer(current, *args, **kwargs)})
            return visitor.state

