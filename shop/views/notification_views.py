"""주문 상태 알림 API

계정 페이지 알림함에서 사용합니다. 본인 알림만 다룹니다.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import mixins, permissions, serializers as drf_serializers, status, viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from ..serializers.notification_serializers import (
    NotificationListSerializer,
    NotificationMarkReadSerializer,
    NotificationSerializer,
)
from ..services.notification_service import NotificationService, NotificationServiceError
from .mixins import ServiceErrorResponseMixin


class NotificationInboxSerializer(drf_serializers.Serializer):
    """알림함 미리보기 응답"""

    count = drf_serializers.IntegerField(source="unread_count")
    notifications = NotificationListSerializer(source="recent", many=True)


class ReadReceiptSerializer(drf_serializers.Serializer):
    """읽음 표시 응답"""

    message = drf_serializers.CharField()
    count = drf_serializers.IntegerField(source="updated")


@extend_schema_view(
    list=extend_schema(
        summary="내 알림 목록을 조회한다.",
        description="주문 상태 알림을 최신순으로 반환한다. 목록에는 본문(message)이 포함되지 않는다.",
        tags=["Notifications"],
    ),
    retrieve=extend_schema(
        summary="알림을 열람한다.",
        description="알림 본문을 반환하고 읽음 표시한다.",
        tags=["Notifications"],
    ),
)
class NotificationViewSet(
    ServiceErrorResponseMixin,
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """
    알림 ViewSet

    - GET  /api/notifications/            목록
    - GET  /api/notifications/{id}/       열람 (읽음 표시)
    - GET  /api/notifications/unread/     읽지 않은 알림 미리보기
    - POST /api/notifications/mark_read/  읽음 표시 (ID 목록 또는 전체)
    """

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = NotificationListSerializer
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return NotificationService.for_user(self.request.user)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        try:
            notification = NotificationService.open(request.user, int(pk))
        except NotificationServiceError as e:
            return self.service_error_response(e)

        return Response(NotificationSerializer(notification).data)

    @extend_schema(
        responses={200: NotificationInboxSerializer},
        summary="읽지 않은 알림을 미리 본다.",
        description="읽지 않은 알림 개수와 최근 5개를 반환한다.",
        tags=["Notifications"],
    )
    @action(detail=False, methods=["get"])
    def unread(self, request: Request) -> Response:
        inbox = NotificationService.inbox(request.user)
        return Response(NotificationInboxSerializer(inbox).data)

    @extend_schema(
        request=NotificationMarkReadSerializer,
        responses={200: ReadReceiptSerializer},
        summary="알림을 읽음 표시한다.",
        description="notification_ids가 비어 있으면 읽지 않은 알림 전체를 읽음 표시한다.",
        tags=["Notifications"],
    )
    @action(detail=False, methods=["post"])
    def mark_read(self, request: Request) -> Response:
        serializer = NotificationMarkReadSerializer(data=request.data, context={"request": request})
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        receipt = NotificationService.mark_read(
            request.user,
            notification_ids=serializer.validated_data.get("notification_ids") or None,
        )
        return Response(ReadReceiptSerializer(receipt).data)
