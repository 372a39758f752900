"""배송 지역 ViewSet

결제 화면의 배송 지역 선택 목록을 제공합니다.
배송비 조회 로직은 DeliveryService에 위임합니다.
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import permissions, serializers as drf_serializers, status, viewsets
from rest_framework.request import Request
from rest_framework.response import Response

from ..serializers.delivery_serializers import DeliveryAreaSerializer
from ..services.delivery_service import DeliveryService

logger = logging.getLogger(__name__)


class ErrorResponseSerializer(drf_serializers.Serializer):
    """에러 응답"""

    error = drf_serializers.CharField()


@extend_schema_view(
    list=extend_schema(
        responses={200: DeliveryAreaSerializer(many=True)},
        summary="배송 지역 목록을 조회한다.",
        description="""처리 내용:
- 배송 가능한 지역과 지역별 고정 배송비를 등록 순서대로 반환한다.""",
        tags=["Delivery"],
    ),
    retrieve=extend_schema(
        responses={200: DeliveryAreaSerializer, 404: ErrorResponseSerializer},
        summary="배송 지역 정보를 조회한다.",
        description="""처리 내용:
- 지역 ID에 해당하는 이름과 배송비를 반환한다.
- 등록되지 않은 지역이면 404를 반환한다.""",
        tags=["Delivery"],
    ),
)
class DeliveryAreaViewSet(viewsets.ViewSet):
    """
    배송 지역 ViewSet

    엔드포인트:
    - GET /api/delivery-areas/       - 배송 지역 목록
    - GET /api/delivery-areas/{id}/  - 배송 지역 상세

    권한: 누구나 조회 가능
    """

    permission_classes = [permissions.AllowAny]
    lookup_field = "area_id"

    def list(self, request: Request) -> Response:
        """배송 지역 목록"""
        serializer = DeliveryAreaSerializer(DeliveryService.list_areas(), many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, area_id: str | None = None) -> Response:
        """배송 지역 상세"""
        area = DeliveryService.find_area(area_id)

        if area is None:
            logger.info("등록되지 않은 배송 지역 조회: area_id=%s", area_id)
            return Response(
                {"error": "배송 지역을 찾을 수 없습니다."},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response(DeliveryAreaSerializer(area).data)
