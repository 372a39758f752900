"""API 문서 엔드포인트 테스트"""

from django.urls import reverse

import pytest
from rest_framework import status


@pytest.mark.django_db
class TestSchemaViews:
    def test_schema_lists_public_paths(self, api_client):
        """OpenAPI 스키마에 배송 지역/알림/추천 경로 포함"""
        # Act
        response = api_client.get(reverse("schema"), {"format": "json"})

        # Assert
        assert response.status_code == status.HTTP_200_OK
        paths = response.json()["paths"]
        assert "/api/delivery-areas/" in paths
        assert "/api/delivery-areas/{area_id}/" in paths
        assert "/api/notifications/unread/" in paths
        assert "/api/referrals/stats/" in paths

    def test_swagger_ui(self, api_client):
        response = api_client.get(reverse("swagger-ui"))

        assert response.status_code == status.HTTP_200_OK
