"""
Django Test Settings
테스트 환경 전용 설정 (pytest, Django test)
"""

import os

os.environ.setdefault("DJANGO_SECRET_KEY", "test-only-secret-key-not-for-production")

from fireworksml.settings.base import *  # noqa: F401, F403, E402
from fireworksml.settings.components.logging import get_logging_config  # noqa: E402

# ==========================================================================
# Test Mode Flag
# ==========================================================================

TESTING = True
DEBUG = False

# ==========================================================================
# Database (SQLite 인메모리 - 외부 DB 없이 테스트)
# ==========================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# ==========================================================================
# Image CDN (테스트용 더미 계정 - 실제 업로드는 mock 처리)
# ==========================================================================

CLOUDINARY_CLOUD_NAME = "test-cloud"
CLOUDINARY_API_KEY = "test-key"
CLOUDINARY_API_SECRET = "test-secret"

FRONTEND_URL = "http://testserver"

# ==========================================================================
# Logging (Quiet mode for tests)
# ==========================================================================

LOGGING = get_logging_config(debug=False, log_to_file=False)

# ==========================================================================
# Password Hashing (빠른 해싱 - 테스트 속도 향상)
# ==========================================================================

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
