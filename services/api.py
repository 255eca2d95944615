"""Backend REST client built on requests."""

import logging
from typing import Any, Callable, Dict, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10

NETWORK_ERROR_MESSAGE = '네트워크 연결을 확인해주세요.'
SERVER_ERROR_MESSAGE = '서버 오류가 발생했습니다.'
UNKNOWN_ERROR_MESSAGE = '알 수 없는 오류가 발생했습니다.'


class ApiError(Exception):
    """Uniform failure raised by ApiClient.

    code is ``NETWORK_ERROR`` when no response was received, ``UNKNOWN_ERROR``
    for anything unexpected, or the code supplied by the server.
    """

    def __init__(self, code: str, message: str, status_code: int = 0):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code, 'message': self.message, 'statusCode': self.status_code}

    def __repr__(self) -> str:
        return f"ApiError(code={self.code!r}, status_code={self.status_code})"


class ApiClient:
    """Thin wrapper around a requests session.

    Each client owns its session, so cookies set by the backend (the auth
    session) stay scoped to one visitor.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if not base_url or not base_url.strip():
            raise ValueError("API base URL cannot be empty")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})

    def _build_url(self, path: str) -> str:
        if not path or not path.strip():
            raise ValueError("API path cannot be empty")
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _error_body(response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiError: For every failure, normalized to code/message/status.
        """
        url = self._build_url(path)
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(
                method, url, json=json, params=params, timeout=self.timeout
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.warning("No response from %s %s: %s", method, url, exc)
            raise ApiError('NETWORK_ERROR', NETWORK_ERROR_MESSAGE, 0) from exc
        except requests.RequestException as exc:
            logger.warning("Request to %s %s failed: %s", method, url, exc)
            raise ApiError('UNKNOWN_ERROR', UNKNOWN_ERROR_MESSAGE, 0) from exc

        if response.status_code >= 400:
            body = self._error_body(response)
            error = ApiError(
                body.get('code') or 'UNKNOWN_ERROR',
                body.get('message') or SERVER_ERROR_MESSAGE,
                response.status_code,
            )
            logger.warning("%s %s -> %s %s", method, url, response.status_code, error.code)
            raise error

        try:
            data = response.json()
        except ValueError as exc:
            raise ApiError('UNKNOWN_ERROR', UNKNOWN_ERROR_MESSAGE, response.status_code) from exc
        return data if isinstance(data, dict) else {}

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request('GET', path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request('POST', path, json=json)

    def close(self) -> None:
        self.session.close()


def parse_body(parse: Callable[[Dict[str, Any]], Any], data: Dict[str, Any]) -> Any:
    """Run ``parse`` over a decoded body.

    A body that does not have the expected shape is reported as
    ``UNKNOWN_ERROR`` like any other unexpected failure.
    """
    try:
        return parse(data)
    except (KeyError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Unexpected response body: %r", exc)
        raise ApiError('UNKNOWN_ERROR', UNKNOWN_ERROR_MESSAGE, 0) from exc
