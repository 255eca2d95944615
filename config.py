"""
환경 설정 및 기능 플래그
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# .env 파일에서 환경 변수 로드
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:3000/api'
DEV_SECRET_KEY = 'halloween_dev_secret'


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() == 'true'


class Config:
    """Base configuration"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEV_SECRET_KEY

    DEBUG = _env_flag('DEBUG')
    TESTING = False

    # 백엔드 API
    API_URL = os.environ.get('API_URL', DEFAULT_API_URL)
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', '10'))

    # 이메일 인증 (고급 모드) 기능 플래그
    ENABLE_EMAIL_AUTH = _env_flag('ENABLE_EMAIL_AUTH')

    # 인증 성공 후 /test 로 이동하기까지의 지연 (초)
    VERIFY_REDIRECT_DELAY = 1

    SESSION_PERMANENT = False

    @classmethod
    def validate(cls):
        """Validate configuration values, raising ValueError on fatal problems"""
        errors = []

        if not cls.API_URL:
            errors.append("API_URL is empty")
        if cls.API_TIMEOUT <= 0:
            errors.append("API_TIMEOUT must be positive")

        if cls.SECRET_KEY == DEV_SECRET_KEY and not (cls.DEBUG or cls.TESTING):
            logger.warning("⚠️ SECRET_KEY is not set; using the development key")

        if errors:
            raise ValueError("Configuration validation failed:\n" + "\n".join(errors))

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    API_URL = 'http://backend.test/api'
    ENABLE_EMAIL_AUTH = False
    VERIFY_REDIRECT_DELAY = 0


def get_config():
    """Get the appropriate configuration based on FLASK_ENV"""
    env = os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig,
    }

    config_class = config_map.get(env, DevelopmentConfig)
    config_class.validate()
    return config_class


@dataclass(frozen=True)
class Features:
    """기능 플래그. 앱 시작 시 한 번 읽고 이후 변경하지 않는다."""
    email_auth: bool = False

    @classmethod
    def from_config(cls, config):
        return cls(email_auth=bool(config.get('ENABLE_EMAIL_AUTH', False)))
