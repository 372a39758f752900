"""추천 서비스 레이어

추천 기록, 추천 통계 조회와 추천 코드 공유 링크를 담당합니다.
바우처 지급/사용 처리는 이 서비스의 범위가 아닙니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from urllib.parse import quote

from django.conf import settings
from django.db.models import QuerySet

from ..models.referral import Referral
from ..models.user import User
from .base import ServiceError, log_service_call

logger = logging.getLogger(__name__)


class ReferralServiceError(ServiceError):
    """추천 서비스 관련 에러"""

    def __init__(self, message: str, code: str = "REFERRAL_ERROR", details: dict | None = None):
        super().__init__(message, code, details)


# 바우처 1장당 할인 금액 (RM)
VOUCHER_VALUE = Decimal("20")


@dataclass
class ReferralStats:
    """추천 통계"""

    total_referrals: int
    available_vouchers: int
    used_vouchers: int
    referrals: list[Referral] = field(default_factory=list)

    @property
    def total_savings(self) -> Decimal:
        """사용한 바우처로 절약한 총 금액"""
        return self.used_vouchers * VOUCHER_VALUE


class ReferralService:
    """추천 관련 조회 서비스"""

    @staticmethod
    @log_service_call
    def get_user_referrals(user: User) -> QuerySet[Referral]:
        """사용자가 추천한 가입 기록 (최신순)"""
        return Referral.objects.filter(referrer=user).order_by("-created_at")

    @staticmethod
    @log_service_call
    def get_stats(user: User) -> ReferralStats:
        """
        추천 통계 조회

        Args:
            user: 사용자

        Returns:
            ReferralStats: 추천 수, 바우처 현황, 추천 기록

        Raises:
            ReferralServiceError: 저장되지 않은 사용자인 경우
        """
        if user.pk is None:
            raise ReferralServiceError("사용자를 찾을 수 없습니다.", code="USER_NOT_FOUND")

        referrals = list(ReferralService.get_user_referrals(user))

        return ReferralStats(
            total_referrals=user.referral_count,
            available_vouchers=user.vouchers,
            used_vouchers=user.vouchers_used,
            referrals=referrals,
        )

    @staticmethod
    def get_referral_link(referral_code: str) -> str:
        """추천 가입 링크 (예: https://shop.example.com/signup?ref=FW-ABC123)"""
        return f"{settings.FRONTEND_URL.rstrip('/')}/signup?ref={referral_code}"

    # ===== 공유 =====

    SHARE_EMAIL_SUBJECT = "Join FireWorks ML!"

    @staticmethod
    def normalize_referral_code(code: str | None) -> str:
        """앞뒤 공백 제거 후 대문자"""
        return (code or "").strip().upper()

    @staticmethod
    @log_service_call
    def validate_referral_code(code: str | None) -> bool:
        """추천 코드가 실제 사용자의 코드인지 (대소문자/공백 무시)"""
        normalized = ReferralService.normalize_referral_code(code)
        if not normalized:
            return False
        return User.objects.filter(referral_code=normalized).exists()

    @staticmethod
    def generate_referral_message(referral_code: str, user_name: str | None = None) -> str:
        """공유용 초대 문구 (추천 링크 포함)"""
        link = ReferralService.get_referral_link(referral_code)
        if user_name:
            return (
                f"{user_name} invited you to join FireWorks ML! Sign up with my referral code "
                f"{referral_code} and I'll get RM{VOUCHER_VALUE} off my next purchase! {link}"
            )
        return f"Join FireWorks ML with my referral code {referral_code} and I'll get RM{VOUCHER_VALUE} off! {link}"

    @staticmethod
    def _encode(value: str) -> str:
        """URL 컴포넌트 인코딩 (encodeURIComponent와 동일한 안전 문자)"""
        return quote(value, safe="-_.!~*'()")

    @staticmethod
    def get_whatsapp_share_link(referral_code: str, user_name: str | None = None) -> str:
        message = ReferralService.generate_referral_message(referral_code, user_name)
        return f"https://wa.me/?text={ReferralService._encode(message)}"

    @staticmethod
    def get_email_share_link(referral_code: str, user_name: str | None = None) -> str:
        body = ReferralService.generate_referral_message(referral_code, user_name)
        return (
            f"mailto:?subject={ReferralService._encode(ReferralService.SHARE_EMAIL_SUBJECT)}"
            f"&body={ReferralService._encode(body)}"
        )
