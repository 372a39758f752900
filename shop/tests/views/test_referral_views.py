"""ReferralStatsView 테스트"""

from django.urls import reverse

import pytest
from rest_framework import status

from shop.tests.factories import ReferralFactory, UserFactory


@pytest.mark.django_db
class TestReferralStatsView:
    """추천 통계 API 테스트"""

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse("referral-stats"))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_stats(self, authenticated_client, user):
        """통계, 추천 기록, 추천 코드/링크"""
        # Arrange
        user.referral_count = 1
        user.vouchers = 2
        user.vouchers_used = 3
        user.save()
        friend = UserFactory(username="friend", email="friend@example.com")
        ReferralFactory(referrer=user, referred_user=friend)

        # Act
        response = authenticated_client.get(reverse("referral-stats"))

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.data["total_referrals"] == 1
        assert response.data["available_vouchers"] == 2
        assert response.data["used_vouchers"] == 3
        assert response.data["total_savings"] == "60.00"
        assert response.data["referral_code"] == "FW-TEST01"
        assert response.data["referral_link"] == "http://testserver/signup?ref=FW-TEST01"
        assert response.data["referrals"][0]["referred_user_email"] == "friend@example.com"

    def test_stats_new_user(self, authenticated_client):
        """추천 기록 없는 사용자"""
        response = authenticated_client.get(reverse("referral-stats"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["total_referrals"] == 0
        assert response.data["total_savings"] == "0.00"
        assert response.data["referrals"] == []


@pytest.mark.django_db
class TestReferralShareLinks:
    """추천 통계 응답의 공유 링크"""

    def test_share_links_in_stats(self, authenticated_client):
        response = authenticated_client.get(reverse("referral-stats"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["whatsapp_share_link"].startswith("https://wa.me/?text=Join%20FireWorks%20ML")
        assert response.data["whatsapp_share_link"].endswith("ref%3DFW-TEST01")
        assert response.data["email_share_link"].startswith("mailto:?subject=Join%20FireWorks%20ML!&body=")

    def test_share_message_uses_full_name(self, authenticated_client, user):
        """이름이 있으면 초대 문구에 포함"""
        # Arrange
        user.first_name = "Aisyah"
        user.last_name = "Rahman"
        user.save()

        # Act
        response = authenticated_client.get(reverse("referral-stats"))

        # Assert
        assert response.data["whatsapp_share_link"].startswith("https://wa.me/?text=Aisyah%20Rahman%20invited")


@pytest.mark.django_db
class TestReferralCodeValidateView:
    """추천 코드 확인 API 테스트"""

    def test_valid_code_anonymous(self, api_client, user):
        """가입 전 사용자도 확인 가능, 코드는 정규화해서 반환"""
        response = api_client.get(reverse("referral-validate"), {"code": " fw-test01 "})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"code": "FW-TEST01", "valid": True}

    def test_unknown_code(self, api_client):
        response = api_client.get(reverse("referral-validate"), {"code": "FW-NOPE00"})

        assert response.data == {"code": "FW-NOPE00", "valid": False}

    def test_missing_code(self, api_client):
        response = api_client.get(reverse("referral-validate"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"code": "", "valid": False}
