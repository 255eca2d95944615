"""Authentication and profile endpoints."""

import logging
from typing import Dict, List

from models import TestResult, User
from services.api import ApiClient, parse_body

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: ApiClient):
        self.client = client

    def send_verification(self, email: str) -> Dict:
        """POST /auth/send-verification -> ``{message, success}``"""
        return self.client.post('/auth/send-verification', json={'email': email})

    def verify_token(self, token: str) -> User:
        """GET /auth/verify-token?token=..."""
        data = self.client.get('/auth/verify-token', params={'token': token})
        return parse_body(lambda body: User.from_dict(body['user']), data)

    def logout(self) -> Dict:
        return self.client.post('/auth/logout')

    def get_profile(self) -> User:
        data = self.client.get('/profile/me')
        return parse_body(lambda body: User.from_dict(body['user']), data)

    def get_history(self) -> List[TestResult]:
        data = self.client.get('/profile/history')
        results = parse_body(lambda body: [TestResult.from_dict(r) for r in body.get('results') or []], data)
        logger.debug("Fetched %d history entries", len(results))
        return results
