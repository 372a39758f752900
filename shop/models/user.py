from __future__ import annotations

import secrets
import string

from django.contrib.auth.models import AbstractUser
from django.core.validators import RegexValidator
from django.db import models

phone_regex = RegexValidator(
    regex=r"^\+?6?01\d-?\d{7,8}$",
    message="전화번호는 '012-3456789' 형식으로 입력해주세요.",
)

REFERRAL_CODE_PREFIX = "FW-"
REFERRAL_CODE_LENGTH = 6


def generate_referral_code() -> str:
    """추천 코드 생성 (예: FW-ABC123)"""
    alphabet = string.ascii_uppercase + string.digits
    return REFERRAL_CODE_PREFIX + "".join(secrets.choice(alphabet) for _ in range(REFERRAL_CODE_LENGTH))


class User(AbstractUser):
    """
    커스텀 User 모델
    AbstractUser의 기본 필드(username, email, password 등)에
    추천/바우처 관련 필드를 추가합니다.
    """

    phone_number = models.CharField(
        max_length=15,
        validators=[phone_regex],
        blank=True,
        verbose_name="전화번호",
        help_text="012-3456789 형식으로 입력",
    )

    # 추천 시스템
    referral_code = models.CharField(
        max_length=16,
        unique=True,
        default=generate_referral_code,
        verbose_name="추천 코드",
    )

    referred_by = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="referred_users",
        verbose_name="추천인",
    )

    referral_count = models.PositiveIntegerField(default=0, verbose_name="추천 가입 수")

    # 바우처 (장당 RM20)
    vouchers = models.PositiveIntegerField(default=0, verbose_name="보유 바우처")

    vouchers_used = models.PositiveIntegerField(default=0, verbose_name="사용한 바우처")

    class Meta:
        db_table = "shop_users"
        verbose_name = "사용자"
        verbose_name_plural = "사용자 목록"

    def __str__(self) -> str:
        return f'{self.username} ({self.get_full_name() or "이름없음"})'
