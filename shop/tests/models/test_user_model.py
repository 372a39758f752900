"""User 모델 테스트"""

import re

import pytest
from django.core.exceptions import ValidationError

from shop.models.user import generate_referral_code
from shop.tests.factories import UserFactory


class TestGenerateReferralCode:
    def test_format(self):
        """FW- 접두사 + 영문 대문자/숫자 6자리"""
        assert re.fullmatch(r"FW-[A-Z0-9]{6}", generate_referral_code())


@pytest.mark.django_db
class TestUserModel:
    """사용자 모델 테스트"""

    def test_default_counters(self):
        user = UserFactory()

        assert user.referral_count == 0
        assert user.vouchers == 0
        assert user.vouchers_used == 0

    def test_referred_by_set_null_on_delete(self):
        """추천인 삭제 시 추천 관계만 해제"""
        # Arrange
        referrer = UserFactory()
        user = UserFactory(referred_by=referrer)

        # Act
        referrer.delete()

        # Assert
        user.refresh_from_db()
        assert user.referred_by is None

    def test_invalid_phone_number(self):
        """말레이시아 휴대폰 번호 형식 검증"""
        user = UserFactory.build(phone_number="1234")

        with pytest.raises(ValidationError) as exc_info:
            user.full_clean(exclude=["password"])

        assert "phone_number" in exc_info.value.message_dict
