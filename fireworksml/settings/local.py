"""
Django Local Development Settings
로컬 개발 환경 전용 설정
"""

import os

from fireworksml.settings.base import *  # noqa: F401, F403
from fireworksml.settings.components.logging import get_logging_config

# ==========================================================================
# Debug Settings
# ==========================================================================

DEBUG = True

# ==========================================================================
# Database (PostgreSQL - Dev/Prod parity)
# ==========================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DATABASE_NAME", "fireworksml_dev"),
        "USER": os.getenv("DATABASE_USER", "postgres"),
        "PASSWORD": os.getenv("DATABASE_PASSWORD", "postgres"),
        "HOST": os.getenv("DATABASE_HOST", "localhost"),
        "PORT": os.getenv("DATABASE_PORT", "5432"),
        "CONN_MAX_AGE": 600,
        "CONN_HEALTH_CHECKS": True,
        "OPTIONS": {
            "connect_timeout": 10,
        },
    }
}

# ==========================================================================
# Logging (Debug mode)
# ==========================================================================

LOGGING = get_logging_config(debug=True)

# ==========================================================================
# Image CDN Warning (개발 환경에서만)
# ==========================================================================

if not CLOUDINARY_CLOUD_NAME:  # noqa: F405
    import warnings

    warnings.warn(
        "⚠️ CLOUDINARY_CLOUD_NAME이 설정되지 않았습니다. "
        "상품 이미지 업로드 기능이 작동하지 않습니다. "
        ".env 파일에 CLOUDINARY_* 값을 추가해주세요."
    )
