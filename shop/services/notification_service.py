"""주문 상태 알림 조회 서비스

계정 페이지의 알림함(목록, 미리보기)과 읽음 표시를 담당합니다.
알림 생성은 주문 상태가 바뀔 때 주문 처리 쪽에서 수행합니다.

사용 예시:
    inbox = NotificationService.inbox(user)
    receipt = NotificationService.mark_read(user, notification_ids=[3, 4])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from django.db import transaction
from django.db.models import QuerySet

if TYPE_CHECKING:
    from ..models.user import User

from ..models.notification import Notification
from .base import ServiceError, log_service_call

logger = logging.getLogger(__name__)


class NotificationServiceError(ServiceError):
    """알림 서비스 관련 에러"""

    def __init__(self, message: str, code: str = "NOTIFICATION_ERROR", details: dict | None = None):
        super().__init__(message, code, details)


@dataclass
class NotificationInbox:
    """알림함 요약"""

    unread_count: int
    recent: list[Notification]


@dataclass
class ReadReceipt:
    """읽음 표시 결과"""

    updated: int

    @property
    def message(self) -> str:
        if not self.updated:
            return "읽지 않은 알림이 없습니다."
        return f"{self.updated}개의 알림을 읽음 처리했습니다."


class NotificationService:
    """알림함 서비스"""

    PREVIEW_LIMIT = 5

    @staticmethod
    def for_user(user: User) -> QuerySet[Notification]:
        """사용자 알림 (최신순)"""
        return Notification.objects.filter(user=user).order_by("-created_at")

    @classmethod
    @log_service_call
    def inbox(cls, user: User, limit: int | None = None) -> NotificationInbox:
        """
        읽지 않은 알림 미리보기

        unread_count는 전체 개수, recent는 최근 limit개(기본 PREVIEW_LIMIT)입니다.
        """
        unread = cls.for_user(user).filter(is_read=False)
        return NotificationInbox(
            unread_count=unread.count(),
            recent=list(unread[: cls.PREVIEW_LIMIT if limit is None else limit]),
        )

    @staticmethod
    @log_service_call
    def unread_count(user: User) -> int:
        return Notification.objects.filter(user=user, is_read=False).count()

    @staticmethod
    @log_service_call
    def get_for_user(user: User, notification_id: int) -> Notification:
        """
        본인 알림 단건 조회

        Raises:
            NotificationServiceError: 없거나 다른 사용자의 알림 (NOTIFICATION_NOT_FOUND)
        """
        notification = Notification.objects.filter(id=notification_id, user=user).first()
        if notification is None:
            raise NotificationServiceError(
                "알림을 찾을 수 없습니다.",
                code="NOTIFICATION_NOT_FOUND",
                details={"notification_id": notification_id},
            )
        return notification

    @classmethod
    @log_service_call
    def open(cls, user: User, notification_id: int) -> Notification:
        """알림을 열람하고 읽음 표시"""
        notification = cls.get_for_user(user, notification_id)

        if not notification.is_read:
            notification.mark_as_read()
            logger.info(
                "[Notification] 열람 | notification_id=%d, user_id=%d, order_id=%s",
                notification.id,
                user.id,
                notification.order_id or "-",
            )

        return notification

    @classmethod
    @log_service_call
    @transaction.atomic
    def mark_read(cls, user: User, notification_ids: list[int] | None = None) -> ReadReceipt:
        """
        읽음 표시

        Args:
            user: 사용자
            notification_ids: 대상 알림 ID (비어 있으면 읽지 않은 알림 전체)

        다른 사용자의 알림 ID는 조용히 제외됩니다.
        """
        pending = cls.for_user(user).filter(is_read=False)
        if notification_ids:
            pending = pending.filter(id__in=notification_ids)

        receipt = ReadReceipt(updated=pending.update(is_read=True))

        logger.info(
            "[Notification] 읽음 표시 | user_id=%d, updated=%d, ids=%s",
            user.id,
            receipt.updated,
            notification_ids or "all",
        )
        return receipt
