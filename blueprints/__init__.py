"""
Blueprints 패키지
"""
from blueprints.home import home_bp
from blueprints.test import test_bp
from blueprints.result import result_bp
from blueprints.auth import auth_bp
from blueprints.profile import profile_bp

__all__ = ['home_bp', 'test_bp', 'result_bp', 'auth_bp', 'profile_bp']
