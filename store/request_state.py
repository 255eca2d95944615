"""
비동기 요청 상태 (NotStarted | Pending | Succeeded | Failed)
"""
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class NotStarted:
    pass


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Succeeded:
    value: Any = None


@dataclass(frozen=True)
class Failed:
    message: str
    code: Optional[str] = None


RequestState = Union[NotStarted, Pending, Succeeded, Failed]

NOT_STARTED = NotStarted()
PENDING = Pending()


def is_pending(state: RequestState) -> bool:
    return isinstance(state, Pending)


def error_of(state: RequestState) -> Optional[str]:
    return state.message if isinstance(state, Failed) else None
