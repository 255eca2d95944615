"""
백엔드 API 클라이언트 및 도메인 서비스
"""
from services.api import ApiClient, ApiError
from services.auth_service import AuthService
from services.test_service import TestService

__all__ = ['ApiClient', 'ApiError', 'AuthService', 'TestService']
