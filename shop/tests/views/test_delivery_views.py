"""
DeliveryAreaViewSet 테스트

테스트 범위:
- 배송 지역 목록 (순서, 금액 표기)
- 배송 지역 상세 (등록/미등록)
- 비로그인 접근
"""

from django.urls import reverse

import pytest
from rest_framework import status

from shop.services.delivery_service import DELIVERY_AREAS


@pytest.mark.django_db
class TestDeliveryAreaList:
    """배송 지역 목록 API 테스트"""

    def test_list_all_areas_anonymous(self, api_client):
        """로그인 없이 전체 지역 조회"""
        # Arrange
        url = reverse("delivery-area-list")

        # Act
        response = api_client.get(url)

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 16
        assert [area["id"] for area in response.data] == [area.id for area in DELIVERY_AREAS]

    def test_list_item_shape(self, api_client):
        """id, name, fee (소수점 2자리 문자열)"""
        response = api_client.get(reverse("delivery-area-list"))

        assert response.data[0] == {
            "id": "kuala-lumpur",
            "name": "Kuala Lumpur (city center)",
            "fee": "100.00",
        }


@pytest.mark.django_db
class TestDeliveryAreaRetrieve:
    """배송 지역 상세 API 테스트"""

    def test_retrieve_known_area(self, api_client):
        """등록된 지역"""
        # Arrange
        url = reverse("delivery-area-detail", kwargs={"area_id": "klang"})

        # Act
        response = api_client.get(url)

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"id": "klang", "name": "Klang", "fee": "150.00"}

    def test_retrieve_sg_buloh(self, api_client):
        response = api_client.get(reverse("delivery-area-detail", kwargs={"area_id": "sg-buloh"}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["name"] == "Sg Buloh"

    def test_retrieve_unknown_area_404(self, api_client):
        """미등록 지역은 404 (배송비 0원과 구분)"""
        # Arrange
        url = reverse("delivery-area-detail", kwargs={"area_id": "penang"})

        # Act
        response = api_client.get(url)

        # Assert
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error"] == "배송 지역을 찾을 수 없습니다."

    def test_retrieve_case_mismatch_404(self, api_client):
        """대소문자 구분"""
        response = api_client.get(reverse("delivery-area-detail", kwargs={"area_id": "Klang"}))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_write_methods_not_allowed(self, authenticated_client):
        """읽기 전용"""
        response = authenticated_client.post(reverse("delivery-area-list"), {"id": "penang"}, format="json")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
