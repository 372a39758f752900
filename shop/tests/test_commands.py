"""Management Command 테스트"""

from io import StringIO
from unittest.mock import patch

import cloudinary.exceptions
import pytest
from django.core.management import call_command

from shop.tests.factories import ProductFactory

EXTERNAL_URL = "https://firebasestorage.googleapis.com/v0/b/shop/o/lamp.jpeg"


@pytest.mark.django_db
class TestMigrateProductImagesCommand:
    """migrate_product_images 테스트"""

    @patch("cloudinary.uploader.upload")
    def test_dry_run_does_not_upload(self, mock_upload):
        # Arrange
        product = ProductFactory(image=EXTERNAL_URL)
        out = StringIO()

        # Act
        call_command("migrate_product_images", "--dry-run", stdout=out)

        # Assert
        mock_upload.assert_not_called()
        assert "이전 대상: 1개" in out.getvalue()
        product.refresh_from_db()
        assert product.image == EXTERNAL_URL

    @patch("cloudinary.uploader.upload")
    def test_migrates_only_external_images(self, mock_upload):
        """Cloudinary 이미지는 건너뜀"""
        # Arrange
        target = ProductFactory(image=EXTERNAL_URL)
        ProductFactory(image="https://res.cloudinary.com/test-cloud/image/upload/done.jpg")
        mock_upload.return_value = {"public_id": "p", "secure_url": "https://res.cloudinary.com/test-cloud/new.jpg"}
        out = StringIO()

        # Act
        call_command("migrate_product_images", "--delay", "0", stdout=out)

        # Assert
        assert mock_upload.call_count == 1
        target.refresh_from_db()
        assert target.image == "https://res.cloudinary.com/test-cloud/new.jpg"
        assert "이전 완료: 1개" in out.getvalue()

    @patch("cloudinary.uploader.upload")
    def test_failure_is_reported_and_others_continue(self, mock_upload):
        """한 상품 실패해도 나머지는 계속 이전"""
        # Arrange
        failing = ProductFactory(image=EXTERNAL_URL)
        ok = ProductFactory(image=EXTERNAL_URL)
        mock_upload.side_effect = [
            cloudinary.exceptions.Error("Resource not found"),
            {"public_id": "p", "secure_url": "https://res.cloudinary.com/test-cloud/ok.jpg"},
        ]
        out, err = StringIO(), StringIO()

        # Act
        call_command("migrate_product_images", "--delay", "0", stdout=out, stderr=err)

        # Assert
        failing.refresh_from_db()
        ok.refresh_from_db()
        assert failing.image == EXTERNAL_URL
        assert ok.image == "https://res.cloudinary.com/test-cloud/ok.jpg"
        assert "Resource not found" in err.getvalue()
        assert f"이전 실패: 1개 (id: [{failing.pk}])" in out.getvalue()

    @patch("cloudinary.uploader.upload")
    def test_limit(self, mock_upload):
        ProductFactory.create_batch(3, image=EXTERNAL_URL)
        mock_upload.return_value = {"public_id": "p", "secure_url": "https://res.cloudinary.com/test-cloud/x.jpg"}

        call_command("migrate_product_images", "--limit", "2", "--delay", "0", stdout=StringIO())

        assert mock_upload.call_count == 2

    @patch("cloudinary.uploader.upload")
    def test_network_error_does_not_stop_batch(self, mock_upload):
        """SDK 예외가 아닌 네트워크 오류도 해당 상품만 건너뜀"""
        # Arrange
        failing = ProductFactory(image=EXTERNAL_URL)
        ok = ProductFactory(image=EXTERNAL_URL)
        mock_upload.side_effect = [
            ConnectionError("connection reset"),
            {"public_id": "p", "secure_url": "https://res.cloudinary.com/test-cloud/ok.jpg"},
        ]
        out, err = StringIO(), StringIO()

        # Act
        call_command("migrate_product_images", "--delay", "0", stdout=out, stderr=err)

        # Assert
        failing.refresh_from_db()
        ok.refresh_from_db()
        assert failing.image == EXTERNAL_URL
        assert ok.image == "https://res.cloudinary.com/test-cloud/ok.jpg"
        assert "ConnectionError: connection reset" in err.getvalue()
        assert "이전 완료: 1개" in out.getvalue()

    @patch("cloudinary.uploader.upload")
    def test_malformed_upload_response_is_skipped(self, mock_upload):
        """secure_url 없는 응답도 실패로 집계"""
        # Arrange
        product = ProductFactory(image=EXTERNAL_URL)
        mock_upload.return_value = {"public_id": "p"}
        out, err = StringIO(), StringIO()

        # Act
        call_command("migrate_product_images", "--delay", "0", stdout=out, stderr=err)

        # Assert
        product.refresh_from_db()
        assert product.image == EXTERNAL_URL
        assert "KeyError" in err.getvalue()
        assert f"이전 실패: 1개 (id: [{product.pk}])" in out.getvalue()
