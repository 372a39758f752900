from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Product(models.Model):
    """상품 기본 정보 (조명 / 불꽃놀이)"""

    AVAILABILITY_CHOICES = [
        ("In Stock", "재고 있음"),
        ("Out of Stock", "품절"),
        ("Limited Stock", "재고 부족"),
    ]

    # 기본 정보
    name = models.CharField(max_length=200, verbose_name="상품명", db_index=True)
    name_zh = models.CharField(max_length=200, blank=True, verbose_name="상품명(중국어)")
    product_code = models.CharField(
        max_length=50,
        blank=True,
        verbose_name="상품 코드",
        help_text="내부 관리용 코드 (관리자 전용)",
    )

    # 분류
    category = models.CharField(max_length=100, verbose_name="카테고리", db_index=True)
    subcategory = models.CharField(max_length=100, verbose_name="하위 카테고리")

    # 상품 설명
    description = models.TextField(blank=True, verbose_name="상품 설명")
    description_zh = models.TextField(blank=True, verbose_name="상품 설명(중국어)")

    # 가격 정보
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="판매가",
    )
    offer_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        verbose_name="할인가",
        help_text="is_on_sale 체크 시 적용되는 가격",
    )

    # 이미지
    image = models.CharField(max_length=500, blank=True, verbose_name="표시 이미지")
    main_image = models.CharField(max_length=500, blank=True, verbose_name="대표 이미지")
    images = models.JSONField(default=list, blank=True, verbose_name="이미지 목록")
    gallery_images = models.JSONField(default=list, blank=True, verbose_name="추가 이미지")
    image_path = models.CharField(
        max_length=300,
        blank=True,
        verbose_name="로컬 이미지 경로",
        help_text="예: hanging-lights/crystal-chandelier-1.jpg",
    )

    # 불꽃놀이 상품 전용 정보
    effect_type = models.CharField(max_length=50, blank=True, verbose_name="효과", help_text="Sparkle, Bang, Aerial 등")
    duration = models.CharField(max_length=50, blank=True, verbose_name="지속 시간")
    noise_level = models.CharField(max_length=20, blank=True, verbose_name="소음")
    shot_count = models.PositiveIntegerField(null=True, blank=True, verbose_name="발사 횟수")
    safety_distance = models.CharField(max_length=50, blank=True, verbose_name="안전 거리")

    # 재고 / 노출
    availability = models.CharField(
        max_length=20,
        choices=AVAILABILITY_CHOICES,
        default="In Stock",
        verbose_name="재고 상태",
    )
    in_stock = models.BooleanField(default=True, verbose_name="재고 여부")
    is_featured = models.BooleanField(default=False, verbose_name="추천 상품")
    is_on_sale = models.BooleanField(default=False, verbose_name="할인 중")
    seasonal = models.BooleanField(default=False, verbose_name="시즌 상품")

    # 리뷰 통계
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
        verbose_name="평점",
    )
    review_count = models.PositiveIntegerField(default=0, verbose_name="리뷰 수")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "상품"
        verbose_name_plural = "상품"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category", "subcategory"], name="shop_product_cat_subcat_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def display_price(self):
        """실제 판매 가격 (할인 중이면 할인가)"""
        if self.is_on_sale and self.offer_price is not None:
            return self.offer_price
        return self.price
