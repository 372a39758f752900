"""서비스 레이어 공통 모듈

- log_service_call: 서비스 메서드 호출 로깅 데코레이터
- ServiceError: 서비스 예외 기본 클래스
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 느린 실행 경고 기준 (ms)
SLOW_CALL_THRESHOLD_MS = 100

# 로그에 남기지 않는 인자
SENSITIVE_KWARGS = ("password", "token", "secret", "api_secret")


def _service_name(func: Callable) -> str:
    """모듈명에서 서비스 이름 추출 (image_service -> ImageService)"""
    module_name = func.__module__.split(".")[-1].replace("_service", "")
    return "".join(part.title() for part in module_name.split("_")) + "Service"


def log_service_call(func: Callable[..., T]) -> Callable[..., T]:
    """
    서비스 메서드 호출 로깅 데코레이터

    - 호출 시작/종료 DEBUG 로깅 (실행 시간 ms)
    - 느린 실행 WARNING
    - 비즈니스 예외(code, message 속성 보유) WARNING
    - 그 외 예외 ERROR (스택 트레이스 포함)

    예외는 삼키지 않고 그대로 다시 발생시킵니다.

    사용법:
        @staticmethod
        @log_service_call
        def some_method(...):
            ...
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> T:
        service_name = _service_name(func)
        func_name = func.__name__
        start_time = time.perf_counter()

        safe_kwargs = {k: v for k, v in kwargs.items() if k not in SENSITIVE_KWARGS}

        logger.debug(
            "[%s.%s] 호출 시작 | args=%s, kwargs=%s",
            service_name,
            func_name,
            args[:2],
            safe_kwargs,
        )

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed = (time.perf_counter() - start_time) * 1000

            if hasattr(e, "code") and hasattr(e, "message"):
                logger.warning(
                    "[%s.%s] 비즈니스 에러 | code=%s, message=%s, elapsed=%.2fms",
                    service_name,
                    func_name,
                    e.code,
                    e.message,
                    elapsed,
                )
            else:
                logger.error(
                    "[%s.%s] 예외 발생 | error=%s, elapsed=%.2fms",
                    service_name,
                    func_name,
                    str(e),
                    elapsed,
                    exc_info=True,
                )
            raise

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.debug("[%s.%s] 호출 완료 | elapsed=%.2fms", service_name, func_name, elapsed)

        if elapsed > SLOW_CALL_THRESHOLD_MS:
            logger.warning(
                "[%s.%s] 느린 실행 감지 | elapsed=%.2fms",
                service_name,
                func_name,
                elapsed,
            )

        return result

    return wrapper


class ServiceError(Exception):
    """
    서비스 레이어 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        code: 에러 코드 (API 응답 status 매핑에 사용)
        details: 추가 상세 정보

    사용법:
        class ReferralServiceError(ServiceError):
            pass

        raise ReferralServiceError("사용자를 찾을 수 없습니다.", code="USER_NOT_FOUND")
    """

    def __init__(self, message: str, code: str = "SERVICE_ERROR", details: dict | None = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"
