from __future__ import annotations

import logging
import re
import time
from typing import Any

from django.conf import settings

import cloudinary
import cloudinary.uploader
import cloudinary.utils

logger = logging.getLogger(__name__)


class CloudinaryClient:
    """
    Cloudinary 이미지 CDN 클라이언트

    공식 문서: https://cloudinary.com/documentation/django_integration

    업로드 실패 시 재시도하지 않고 SDK 예외를 그대로 호출자에게 전달합니다.
    """

    def __init__(self) -> None:
        """
        초기화
        settings에서 계정 정보를 가져와 SDK를 설정합니다.
        """
        self.cloud_name: str = settings.CLOUDINARY_CLOUD_NAME
        self.upload_folder: str = settings.CLOUDINARY_UPLOAD_FOLDER
        self.default_image_options: dict[str, Any] = dict(settings.CLOUDINARY_DEFAULT_IMAGE_OPTIONS)

        cloudinary.config(
            cloud_name=self.cloud_name,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            secure=True,
        )

    def get_image_url(self, public_id: str, **options: Any) -> str:
        """
        최적화된 이미지 URL 생성

        기본 옵션(자동 포맷/품질, 400x400 fill, 자동 gravity)에
        호출자가 넘긴 옵션을 덮어써서 URL을 만듭니다.

        Args:
            public_id: 저장된 이미지의 public ID
            **options: width, height, crop, gravity, fetch_format, quality 등

        Returns:
            CDN 이미지 URL
        """
        url_options = {**self.default_image_options, **options}
        url, _ = cloudinary.utils.cloudinary_url(public_id, **url_options)
        return url

    def upload_image_with_metadata(
        self,
        image_path: str,
        public_id: str,
        metadata: dict[str, str] | None = None,
        **upload_options: Any,
    ) -> dict[str, Any]:
        """
        메타데이터와 함께 이미지 업로드

        Args:
            image_path: 업로드할 로컬 파일 경로 (또는 URL)
            public_id: 저장할 public ID
            metadata: 이미지에 붙일 context 메타데이터
            **upload_options: overwrite 등 추가 업로드 옵션

        Returns:
            Cloudinary 업로드 응답 (secure_url, public_id 등)

        Raises:
            cloudinary.exceptions.Error: 업로드 실패시 (네트워크 오류 포함)
        """
        try:
            result = cloudinary.uploader.upload(
                image_path,
                public_id=public_id,
                folder=self.upload_folder,
                context=metadata or {},
                resource_type="auto",
                **upload_options,
            )
        except Exception as e:
            logger.error(
                "[Cloudinary] 업로드 실패 | public_id=%s, error=%s",
                public_id,
                str(e),
            )
            raise

        logger.info(
            "[Cloudinary] 업로드 완료 | public_id=%s, url=%s",
            result.get("public_id"),
            result.get("secure_url"),
        )
        return result

    @staticmethod
    def build_product_public_id(product_name: str, timestamp: int | None = None) -> str:
        """
        상품 이미지 public ID 생성

        예: "Crystal Chandelier" -> "products/crystal-chandelier-1718000000000"

        Args:
            product_name: 상품명
            timestamp: 밀리초 단위 타임스탬프 (None이면 현재 시각)
        """
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        name_slug = re.sub(r"\s+", "-", product_name.lower())
        return f"products/{name_slug}-{timestamp}"
