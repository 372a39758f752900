"""
상품 이미지 Cloudinary 이전 Management Command

외부 저장소 URL을 표시 이미지로 쓰는 상품을 찾아 Cloudinary로 업로드합니다.
실패한 상품은 건너뛰고 마지막에 결과를 요약합니다.
"""

import time

from django.core.management.base import BaseCommand

from shop.models import Product
from shop.services.product_service import ProductService


class Command(BaseCommand):
    help = "외부 URL 상품 이미지를 Cloudinary로 이전합니다"

    def add_arguments(self, parser):
        parser.add_argument(
            "--limit",
            type=int,
            default=None,
            help="이전할 최대 상품 수 (기본: 전체)",
        )
        parser.add_argument(
            "--delay",
            type=float,
            default=1.0,
            help="업로드 간 대기 시간 초 (기본: 1.0)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="실제 업로드하지 않고 이전 대상만 출력",
        )

    def handle(self, *args, **options):
        limit = options["limit"]
        delay = options["delay"]
        dry_run = options["dry_run"]

        targets = [p for p in Product.objects.order_by("id") if ProductService.needs_cdn_migration(p)]
        if limit is not None:
            targets = targets[:limit]

        self.stdout.write(self.style.WARNING(f"=== 상품 이미지 이전 {'(DRY RUN)' if dry_run else ''} ==="))
        self.stdout.write(f"이전 대상: {len(targets)}개")
        self.stdout.write("")

        if dry_run:
            for product in targets:
                self.stdout.write(f"- [{product.pk}] {product.name}")
            self.stdout.write(self.style.WARNING("DRY RUN 모드: 실제로 업로드하지 않았습니다."))
            return

        migrated = 0
        failed = []

        for index, product in enumerate(targets):
            if index and delay:
                time.sleep(delay)

            try:
                url = ProductService.migrate_product_image(product)
            except Exception as e:
                failed.append(product.pk)
                self.stderr.write(self.style.ERROR(f"✗ [{product.pk}] {product.name}: {type(e).__name__}: {e}"))
                continue

            migrated += 1
            self.stdout.write(f"✓ [{product.pk}] {product.name} -> {url}")

        self.stdout.write("")
        self.stdout.write(self.style.SUCCESS(f"이전 완료: {migrated}개"))
        if failed:
            self.stdout.write(self.style.ERROR(f"이전 실패: {len(failed)}개 (id: {failed})"))
