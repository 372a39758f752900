from __future__ import annotations

from django.utils import timezone

from rest_framework import serializers

from ..models.notification import Notification


def format_relative_time(created_at) -> str:
    """
    생성 시간을 상대적으로 표시

    예: "방금 전", "5분 전", "1시간 전", "3일 전", 7일 이상이면 날짜
    """
    seconds = (timezone.now() - created_at).total_seconds()

    if seconds < 60:
        return "방금 전"
    elif seconds < 3600:  # 1시간
        return f"{int(seconds / 60)}분 전"
    elif seconds < 86400:  # 1일
        return f"{int(seconds / 3600)}시간 전"
    elif seconds < 604800:  # 7일
        return f"{int(seconds / 86400)}일 전"
    return created_at.strftime("%Y-%m-%d")


class NotificationListSerializer(serializers.ModelSerializer):
    """
    알림 목록 조회용 경량 Serializer

    목록에서는 message 필드를 제외합니다.
    """

    notification_type_display = serializers.CharField(source="get_notification_type_display", read_only=True)
    created_at_display = serializers.SerializerMethodField()

    class Meta:
        model = Notification
        fields = [
            "id",
            "notification_type",
            "notification_type_display",
            "title",
            "order_id",
            "is_read",
            "created_at",
            "created_at_display",
        ]
        read_only_fields = fields

    def get_created_at_display(self, obj: Notification) -> str:
        return format_relative_time(obj.created_at)


class NotificationSerializer(NotificationListSerializer):
    """알림 상세 조회용 Serializer (message 포함)"""

    class Meta(NotificationListSerializer.Meta):
        fields = [
            "id",
            "notification_type",
            "notification_type_display",
            "title",
            "message",
            "order_id",
            "is_read",
            "created_at",
            "created_at_display",
        ]
        read_only_fields = fields


class NotificationMarkReadSerializer(serializers.Serializer):
    """
    알림 읽음 처리 Serializer

    여러 알림을 한번에 읽음 처리할 수 있습니다.
    """

    notification_ids = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        help_text="읽음 처리할 알림 ID 목록 (빈 리스트면 전체 읽음)",
    )

    def validate_notification_ids(self, value: list[int]) -> list[int]:
        """알림 ID가 실제로 존재하고, 현재 사용자의 것인지 확인"""
        if not value:
            return value

        user = self.context["request"].user
        requested_ids = set(value)
        found_ids = set(
            Notification.objects.filter(id__in=requested_ids, user=user).values_list("id", flat=True)
        )
        if found_ids != requested_ids:
            missing = sorted(requested_ids - found_ids)
            raise serializers.ValidationError(f"다음 알림을 찾을 수 없거나 권한이 없습니다: {missing}")
        return value
