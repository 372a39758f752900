"""
상품 관련 비즈니스 로직

- 상품 카드에 표시할 이미지 경로 결정
- 상품 이미지 업로드 (Cloudinary)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from ..utils.cloudinary_client import CloudinaryClient
from .base import log_service_call

if TYPE_CHECKING:
    from shop.models.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """상품 관련 서비스 클래스"""

    CDN_HOST = "res.cloudinary.com"
    LOCAL_IMAGE_PREFIX = "/images/products/"
    DEFAULT_CATEGORY_IMAGE = "/images/categories/ceiling-lights.jpg"

    # 카테고리별 대체 이미지
    CATEGORY_IMAGE_MAP = {
        "others": "/images/categories/ceiling-lights.jpg",
        "hanging-lights": "/images/categories/hanging-light.jpg",
        "spotlight": "/images/categories/Spot-Lights.jpg",
        "pendant-lights": "/images/categories/pandent-light.jpg",
        "magnetic-light": "/images/categories/Megnetic-lights.jpg",
        "led-tube": "/images/categories/Led-tube.jpg",
        "office-lights": "/images/categories/Office-lights.jpg",
        "warehouse-light": "/images/categories/Warehouse-light.jpg",
        "led-strip": "/images/categories/Led-strip.jpg",
        "aluminum-profile": "/images/categories/aluminumProfile-Lights.jpg",
        "mirror-light": "/images/categories/Mirror-lights.jpg",
        "led-track-lights": "/images/categories/Led-track-lights.jpg",
        "wall": "/images/categories/Wall-lights.jpg",
        "stand": "/images/categories/Stand-lights.jpg",
        "garden-light": "/images/categories/garden-lights.jpeg",
        "floodlight": "/images/categories/flood-lights.jpg",
        "solar-light": "/images/categories/Solar-lights.jpg",
    }

    @staticmethod
    def category_slug(category: str) -> str:
        """카테고리명을 slug로 변환 (소문자, 공백 -> 하이픈)"""
        return category.lower().replace(" ", "-")

    @classmethod
    def get_image_path(cls, product: Product, category: str | None = None) -> str:
        """
        상품 카드에 표시할 이미지 경로

        우선순위:
        1. image (Cloudinary / 기존 업로드 URL)
        2. main_image
        3. images 첫 번째
        4. gallery_images 첫 번째
        5. 로컬 image_path
        6. 카테고리 대체 이미지
        7. 기본 이미지

        Args:
            product: 상품
            category: 대체 이미지 선택에 쓸 카테고리명

        Returns:
            str: 이미지 URL 또는 경로
        """
        if product.image:
            return product.image

        if product.main_image:
            return product.main_image

        if product.images:
            return product.images[0]

        if product.gallery_images:
            return product.gallery_images[0]

        if product.image_path:
            return f"{cls.LOCAL_IMAGE_PREFIX}{product.image_path}"

        if category:
            return cls.CATEGORY_IMAGE_MAP.get(cls.category_slug(category), cls.DEFAULT_CATEGORY_IMAGE)

        return cls.DEFAULT_CATEGORY_IMAGE

    @classmethod
    def organize_image_path(cls, category: str, product_name: str, index: int = 1) -> str:
        """
        로컬 이미지 저장 경로 생성

        예: ("Hanging Lights", "Crystal Chandelier!") -> "hanging-lights/crystal-chandelier-1.jpg"
        """
        product_slug = re.sub(r"[^a-z0-9-]", "", product_name.lower().replace(" ", "-"))
        return f"{cls.category_slug(category)}/{product_slug}-{index}.jpg"

    @staticmethod
    @log_service_call
    def upload_product_image(product: Product, image_path: str) -> dict[str, Any]:
        """
        상품 이미지를 Cloudinary에 업로드하고 상품에 연결

        업로드된 URL은 images 목록에 추가되며,
        표시 이미지가 없으면 표시 이미지로도 설정됩니다.

        Args:
            product: 상품
            image_path: 업로드할 파일 경로

        Returns:
            dict: Cloudinary 업로드 응답

        Raises:
            cloudinary.exceptions.Error: 업로드 실패시 (재시도 없음)
        """
        client = CloudinaryClient()
        public_id = client.build_product_public_id(product.name)

        result = client.upload_image_with_metadata(
            image_path,
            public_id,
            metadata={
                "product_name": product.name,
                "category": product.category or "",
                "subcategory": product.subcategory or "",
            },
        )

        secure_url = result["secure_url"]
        product.images = [*product.images, secure_url]
        update_fields = ["images", "updated_at"]
        if not product.image:
            product.image = secure_url
            update_fields.append("image")
        product.save(update_fields=update_fields)

        logger.info("상품 이미지 업로드: product_id=%s, url=%s", product.pk, secure_url)

        return result

    @classmethod
    def needs_cdn_migration(cls, product: Product) -> bool:
        """외부 URL 표시 이미지가 아직 Cloudinary로 옮겨지지 않았는지"""
        source = product.image or product.main_image
        return bool(source) and source.startswith("http") and cls.CDN_HOST not in source

    @classmethod
    @log_service_call
    def migrate_product_image(cls, product: Product) -> str | None:
        """
        외부 저장소의 상품 이미지를 Cloudinary로 이전

        원격 URL을 그대로 Cloudinary에 업로드하고 표시 이미지를 교체합니다.

        Returns:
            str | None: 새 이미지 URL (이전 대상이 아니면 None)

        Raises:
            cloudinary.exceptions.Error: 업로드 실패시
        """
        if not cls.needs_cdn_migration(product):
            return None

        source = product.image or product.main_image
        result = CloudinaryClient().upload_image_with_metadata(
            source,
            f"products/{product.pk}",
            metadata={
                "product_name": product.name,
                "category": product.category or "",
                "price": str(product.price),
                "description": product.description or "",
            },
            overwrite=True,
        )

        product.image = result["secure_url"]
        product.save(update_fields=["image", "updated_at"])

        logger.info("상품 이미지 이전: product_id=%s, url=%s", product.pk, product.image)

        return product.image
