"""
상태 저장소 패키지 (test / auth 두 개의 독립 슬라이스)
"""
from store.store import AppState, StateStore, StoreView

__all__ = ['AppState', 'StateStore', 'StoreView']
