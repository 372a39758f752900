"""View mixins for common functionality"""

import logging

from rest_framework import status
from rest_framework.response import Response

from ..services.base import ServiceError

logger = logging.getLogger(__name__)


class ServiceErrorResponseMixin:
    """
    서비스 예외를 API 에러 응답으로 변환하는 Mixin

    *_NOT_FOUND 코드는 404, 그 외는 400으로 응답합니다.
    details는 응답 본문에 함께 담깁니다.
    """

    def service_error_response(self, error: ServiceError) -> Response:
        if error.code.endswith("_NOT_FOUND"):
            http_status = status.HTTP_404_NOT_FOUND
        else:
            http_status = status.HTTP_400_BAD_REQUEST

        logger.info("서비스 에러 응답: code=%s, status=%d", error.code, http_status)

        return Response({"error": error.message, **error.details}, status=http_status)
