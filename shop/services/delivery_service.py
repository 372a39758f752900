"""배송 지역 서비스 레이어

배송 지역별 고정 배송비를 조회합니다.

배송 지역 목록은 모듈 로드 시 한 번 정의되는 정적 데이터이며,
런타임에 추가/수정/삭제하는 경로는 없습니다.

사용 예시:
    fee = DeliveryService.get_delivery_fee("kuala-lumpur")  # Decimal("100")
    name = DeliveryService.get_delivery_area_name("klang")  # "Klang"
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DeliveryArea:
    """배송 지역 (불변)"""

    id: str  # 소문자 하이픈 토큰 (조회 키)
    name: str  # 화면 표시용 이름
    fee: Decimal  # 고정 배송비 (RM)


# 배송 지역 목록 (선언 순서 유지)
DELIVERY_AREAS: tuple[DeliveryArea, ...] = (
    DeliveryArea("kuala-lumpur", "Kuala Lumpur (city center)", Decimal("100")),
    DeliveryArea("petaling-jaya", "Petaling Jaya", Decimal("100")),
    DeliveryArea("shah-alam", "Shah Alam", Decimal("150")),
    DeliveryArea("subang-jaya", "Subang Jaya", Decimal("100")),
    DeliveryArea("klang", "Klang", Decimal("150")),
    DeliveryArea("ampang-jaya", "Ampang Jaya", Decimal("100")),
    DeliveryArea("rawang", "Rawang", Decimal("150")),
    DeliveryArea("selayang", "Selayang", Decimal("140")),
    DeliveryArea("cheras", "Cheras", Decimal("100")),
    DeliveryArea("kajang", "Kajang", Decimal("120")),
    DeliveryArea("bangi", "Bangi", Decimal("120")),
    DeliveryArea("bukit-jalil", "Bukit Jalil", Decimal("100")),
    DeliveryArea("puchong", "Puchong", Decimal("120")),
    DeliveryArea("kepong", "Kepong", Decimal("120")),
    DeliveryArea("sg-buloh", "Sg Buloh", Decimal("150")),
    DeliveryArea("serdang", "Serdang", Decimal("100")),
)


class DeliveryService:
    """배송 지역 관련 조회 로직을 처리하는 서비스"""

    # 알 수 없는 지역의 기본값
    UNKNOWN_AREA_FEE = Decimal("0")
    UNKNOWN_AREA_NAME = ""

    @classmethod
    def list_areas(cls) -> tuple[DeliveryArea, ...]:
        """전체 배송 지역 (선언 순서)"""
        return DELIVERY_AREAS

    @classmethod
    def find_area(cls, area_id: str | None) -> DeliveryArea | None:
        """
        배송 지역 조회

        id가 정확히 일치하는(대소문자 구분) 첫 번째 지역을 반환합니다.

        Args:
            area_id: 배송 지역 ID

        Returns:
            DeliveryArea | None: 일치하는 지역이 없으면 None
        """
        return next((area for area in DELIVERY_AREAS if area.id == area_id), None)

    @classmethod
    def is_known_area(cls, area_id: str | None) -> bool:
        """등록된 배송 지역인지 확인"""
        return cls.find_area(area_id) is not None

    @classmethod
    def get_delivery_fee(cls, area_id: str | None) -> Decimal:
        """
        배송비 조회

        Args:
            area_id: 배송 지역 ID

        Returns:
            Decimal: 지역 배송비. 등록되지 않은 지역이면 0

        Note:
            0은 "무료배송"과 "알 수 없는 지역"을 구분하지 않습니다.
            지역 검증이 필요하면 호출하는 쪽에서 is_known_area()로 확인하세요.
        """
        area = cls.find_area(area_id)
        return area.fee if area else cls.UNKNOWN_AREA_FEE

    @classmethod
    def get_delivery_area_name(cls, area_id: str | None) -> str:
        """
        배송 지역 이름 조회

        Args:
            area_id: 배송 지역 ID

        Returns:
            str: 지역 이름. 등록되지 않은 지역이면 빈 문자열
        """
        area = cls.find_area(area_id)
        return area.name if area else cls.UNKNOWN_AREA_NAME
