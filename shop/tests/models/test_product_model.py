"""Product 모델 테스트"""

from decimal import Decimal

import pytest

from shop.tests.factories import ProductFactory, TestConstants


@pytest.mark.django_db
class TestProductDisplayPrice:
    """실제 판매 가격 테스트"""

    def test_regular_price(self):
        """할인 중이 아니면 정가"""
        product = ProductFactory(offer_price=Decimal("50.00"))

        assert product.display_price == TestConstants.DEFAULT_PRODUCT_PRICE

    def test_offer_price_when_on_sale(self):
        """할인 중이면 할인가"""
        product = ProductFactory.on_sale()

        assert product.display_price == TestConstants.DEFAULT_OFFER_PRICE

    def test_on_sale_without_offer_price(self):
        """할인 표시만 있고 할인가가 없으면 정가"""
        product = ProductFactory(is_on_sale=True, offer_price=None)

        assert product.display_price == TestConstants.DEFAULT_PRODUCT_PRICE

    def test_image_lists_default_empty(self):
        """이미지 목록 기본값은 빈 리스트 (인스턴스 간 공유되지 않음)"""
        first = ProductFactory()
        second = ProductFactory()
        first.images.append("https://example.com/1.jpg")

        assert second.images == []
        assert first.gallery_images == []
