"""DeliveryService 단위 테스트"""

import dataclasses
from decimal import Decimal

import pytest

from shop.services.delivery_service import DELIVERY_AREAS, DeliveryArea, DeliveryService


class TestDeliveryAreaDirectory:
    """배송 지역 목록 데이터 검증"""

    def test_area_ids_are_unique(self):
        """지역 ID 중복 없음"""
        # Arrange
        area_ids = [area.id for area in DELIVERY_AREAS]

        # Assert
        assert len(area_ids) == len(set(area_ids))

    def test_all_fees_are_non_negative(self):
        """모든 배송비는 0 이상"""
        for area in DELIVERY_AREAS:
            assert area.fee >= 0, area.id

    def test_all_fees_are_finite_decimals(self):
        """모든 배송비는 유한한 Decimal"""
        for area in DELIVERY_AREAS:
            assert isinstance(area.fee, Decimal)
            assert area.fee.is_finite()

    def test_area_ids_are_lowercase_hyphenated(self):
        """지역 ID는 소문자 하이픈 토큰"""
        for area in DELIVERY_AREAS:
            assert area.id == area.id.lower()
            assert " " not in area.id

    def test_directory_has_sixteen_areas(self):
        """배송 지역 16곳"""
        assert len(DELIVERY_AREAS) == 16

    def test_directory_is_immutable(self):
        """목록과 개별 지역 모두 수정 불가"""
        # Arrange
        area = DELIVERY_AREAS[0]

        # Act & Assert
        assert isinstance(DELIVERY_AREAS, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            area.fee = Decimal("0")

    def test_list_areas_preserves_declaration_order(self):
        """list_areas는 선언 순서 그대로 반환"""
        # Act
        areas = DeliveryService.list_areas()

        # Assert
        assert areas[0].id == "kuala-lumpur"
        assert areas[-1].id == "serdang"
        assert [a.id for a in areas] == [a.id for a in DELIVERY_AREAS]


class TestDeliveryServiceGetDeliveryFee:
    """배송비 조회 테스트"""

    @pytest.mark.parametrize("area", DELIVERY_AREAS, ids=lambda area: area.id)
    def test_known_area_returns_configured_fee(self, area):
        """등록된 모든 지역은 설정된 배송비 반환"""
        assert DeliveryService.get_delivery_fee(area.id) == area.fee

    def test_kuala_lumpur(self):
        """쿠알라룸푸르 RM100"""
        assert DeliveryService.get_delivery_fee("kuala-lumpur") == 100

    def test_klang(self):
        """클랑 RM150"""
        assert DeliveryService.get_delivery_fee("klang") == 150

    def test_selayang(self):
        """슬라양 RM140"""
        assert DeliveryService.get_delivery_fee("selayang") == Decimal("140")

    def test_unknown_area_returns_zero(self):
        """등록되지 않은 지역은 0"""
        assert DeliveryService.get_delivery_fee("unknown-area") == 0

    def test_empty_string_returns_zero(self):
        """빈 문자열 (경계값)"""
        assert DeliveryService.get_delivery_fee("") == 0

    def test_whitespace_returns_zero(self):
        """공백 문자열 (경계값)"""
        assert DeliveryService.get_delivery_fee("   ") == 0

    def test_case_mismatch_returns_zero(self):
        """대소문자 불일치는 매칭하지 않음"""
        assert DeliveryService.get_delivery_fee("Kuala-Lumpur") == 0

    def test_padded_id_returns_zero(self):
        """앞뒤 공백이 붙은 ID는 매칭하지 않음"""
        assert DeliveryService.get_delivery_fee(" klang ") == 0

    def test_none_returns_zero(self):
        """None 입력도 예외 없이 0"""
        assert DeliveryService.get_delivery_fee(None) == 0

    def test_unknown_area_fee_is_decimal(self):
        """기본값도 Decimal"""
        assert isinstance(DeliveryService.get_delivery_fee("unknown-area"), Decimal)


class TestDeliveryServiceGetDeliveryAreaName:
    """배송 지역 이름 조회 테스트"""

    @pytest.mark.parametrize("area", DELIVERY_AREAS, ids=lambda area: area.id)
    def test_known_area_returns_configured_name(self, area):
        """등록된 모든 지역은 설정된 이름 반환"""
        assert DeliveryService.get_delivery_area_name(area.id) == area.name

    def test_subang_jaya(self):
        """수방자야"""
        assert DeliveryService.get_delivery_area_name("subang-jaya") == "Subang Jaya"

    def test_kuala_lumpur_display_name(self):
        """표시 이름은 ID와 다를 수 있음"""
        assert DeliveryService.get_delivery_area_name("kuala-lumpur") == "Kuala Lumpur (city center)"

    def test_empty_string_returns_empty(self):
        """빈 문자열 (경계값)"""
        assert DeliveryService.get_delivery_area_name("") == ""

    def test_unknown_area_returns_empty(self):
        """등록되지 않은 지역"""
        assert DeliveryService.get_delivery_area_name("penang") == ""

    def test_case_mismatch_returns_empty(self):
        """대소문자 불일치"""
        assert DeliveryService.get_delivery_area_name("SUBANG-JAYA") == ""

    def test_none_returns_empty(self):
        """None 입력"""
        assert DeliveryService.get_delivery_area_name(None) == ""


class TestDeliveryServiceFindArea:
    """내부 조회 테스트 (없음과 0원 구분)"""

    def test_find_known_area(self):
        """등록된 지역은 DeliveryArea 반환"""
        # Act
        area = DeliveryService.find_area("kajang")

        # Assert
        assert area == DeliveryArea("kajang", "Kajang", Decimal("120"))

    def test_find_unknown_area_returns_none(self):
        """등록되지 않은 지역은 None (0원과 구분)"""
        assert DeliveryService.find_area("unknown-area") is None

    def test_is_known_area(self):
        """호출자 측 검증용"""
        assert DeliveryService.is_known_area("bangi") is True
        assert DeliveryService.is_known_area("Bangi") is False
        assert DeliveryService.is_known_area("") is False
