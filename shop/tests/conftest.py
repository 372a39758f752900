import logging

import pytest
from rest_framework.test import APIClient

from shop.tests.factories import UserFactory

# ==========================================
# 1. 전역 설정 (Session Scope)
# ==========================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging_for_tests():
    """
    테스트 환경에서 로그 propagation 활성화

    caplog가 로그를 캡처할 수 있도록 propagate=True로 설정
    """
    for logger_name in [
        "shop.services",
        "shop.views",
        "shop.utils.cloudinary_client",
    ]:
        logging.getLogger(logger_name).propagate = True


# ==========================================
# 2. API 클라이언트 Fixture
# ==========================================


@pytest.fixture
def api_client():
    """
    DRF APIClient 인스턴스

    매 테스트마다 새로운 클라이언트 생성
    """
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, user):
    """
    인증된 API 클라이언트

    force_authenticate로 user fixture 사용자로 인증합니다.
    """
    api_client.force_authenticate(user=user)
    return api_client


# ==========================================
# 3. 사용자(User) Fixture
# ==========================================


@pytest.fixture
def user(db):
    """
    기본 일반 사용자

    - username: testuser
    - referral_code: FW-TEST01
    """
    return UserFactory(
        username="testuser",
        email="test@example.com",
        referral_code="FW-TEST01",
    )


@pytest.fixture
def other_user(db):
    """다른 사용자 (권한 검증용)"""
    return UserFactory(username="otheruser", email="other@example.com")
