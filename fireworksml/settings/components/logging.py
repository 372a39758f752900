"""
Logging Configuration
로깅 관련 모든 설정을 관리합니다.
"""

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

LOGS_DIR = BASE_DIR / "logs"


def get_logging_config(debug: bool = False, log_to_file: bool = True) -> dict:
    """
    환경에 맞는 로깅 설정을 반환합니다.

    Args:
        debug: DEBUG 모드 여부
        log_to_file: 이미지 업로드 로그를 파일에도 남길지 여부
    """
    handlers = {
        "console": {
            "level": "DEBUG" if debug else "INFO",
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    }
    upload_handlers = ["console"]

    if log_to_file:
        LOGS_DIR.mkdir(exist_ok=True)
        handlers["file"] = {
            "level": "INFO",
            "class": "logging.FileHandler",
            "filename": LOGS_DIR / "upload.log",
            "formatter": "verbose",
        }
        upload_handlers.append("file")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
                "style": "{",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "loggers": {
            # Django request 로거 (400/500 에러 자동 로깅)
            "django.request": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "shop.services": {
                "handlers": ["console"],
                "level": "DEBUG" if debug else "INFO",
                "propagate": False,
            },
            "shop.views": {
                "handlers": ["console"],
                "level": "DEBUG" if debug else "INFO",
                "propagate": False,
            },
            # 이미지 업로드 (외부 CDN 호출)
            "shop.utils.cloudinary_client": {
                "handlers": upload_handlers,
                "level": "INFO",
                "propagate": False,
            },
        },
    }
