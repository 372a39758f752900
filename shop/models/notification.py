from django.conf import settings
from django.db import models


class Notification(models.Model):
    """
    인앱 알림 모델

    현재는 주문 상태 변경 알림만 사용합니다.
    """

    TYPE_CHOICES = [
        ("order_status", "주문 상태 변경"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications",
        verbose_name="사용자",
    )

    notification_type = models.CharField(
        max_length=20,
        choices=TYPE_CHOICES,
        default="order_status",
        verbose_name="알림 타입",
    )

    title = models.CharField(max_length=100, verbose_name="제목")
    message = models.TextField(verbose_name="내용")

    # 관련 주문 번호
    order_id = models.CharField(max_length=50, blank=True, verbose_name="주문 번호")

    is_read = models.BooleanField(default=False, verbose_name="읽음 여부")

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="생성 시간")

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "알림"
        verbose_name_plural = "알림"
        indexes = [
            models.Index(fields=["user", "-created_at"], name="shop_notif_user_created_idx"),
            models.Index(fields=["user", "is_read"], name="shop_notif_user_read_idx"),
        ]

    def __str__(self):
        return f"[{self.get_notification_type_display()}] {self.title}"

    def mark_as_read(self):
        """알림을 읽음 처리"""
        if not self.is_read:
            self.is_read = True
            self.save(update_fields=["is_read"])
