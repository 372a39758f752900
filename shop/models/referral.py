from django.conf import settings
from django.db import models


class Referral(models.Model):
    """
    추천 가입 기록

    추천 코드로 신규 회원이 가입할 때 한 건 생성됩니다.
    한 사용자는 한 번만 추천받을 수 있습니다.
    """

    referrer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="referrals_made",
        verbose_name="추천인",
    )

    referred_user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="referral_received",
        verbose_name="가입자",
    )

    # 표시용 (가입자 이메일 스냅샷)
    referred_user_email = models.EmailField(verbose_name="가입자 이메일")

    voucher_awarded = models.BooleanField(default=False, verbose_name="바우처 지급 여부")

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="가입 일시")

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "추천 기록"
        verbose_name_plural = "추천 기록"
        indexes = [
            models.Index(fields=["referrer", "-created_at"], name="shop_referral_referrer_idx"),
        ]

    def __str__(self):
        return f"{self.referrer} -> {self.referred_user_email}"
