from django.contrib import admin
from django.utils.html import format_html

from .models import Notification, Product, Referral, User
from .services.product_service import ProductService


# User Admin
@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    사용자 관리자 페이지 설정
    """

    list_display = [
        "username",
        "email",
        "phone_number",
        "referral_code",
        "referral_count",
        "vouchers",
        "vouchers_used",
        "date_joined",
        "is_active",
    ]
    list_filter = ["is_active", "is_staff", "date_joined"]
    search_fields = ["username", "email", "phone_number", "referral_code"]
    date_hierarchy = "date_joined"
    ordering = ["-date_joined"]
    raw_id_fields = ["referred_by"]


# Product Admin
@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    상품 관리
    - 가격, 재고 상태 한눈에 확인
    - 표시 이미지 미리보기
    """

    list_display = [
        "name",
        "category",
        "subcategory",
        "formatted_price",
        "availability",
        "in_stock",
        "is_on_sale",
        "is_featured",
        "created_at",
    ]

    list_filter = ["category", "availability", "in_stock", "is_on_sale", "is_featured", "seasonal"]
    search_fields = ["name", "name_zh", "product_code", "description"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]
    readonly_fields = ["image_preview", "created_at", "updated_at"]

    fieldsets = (
        ("기본 정보", {"fields": ("name", "name_zh", "product_code", "category", "subcategory")}),
        ("가격", {"fields": ("price", "offer_price", "is_on_sale")}),
        ("재고 및 노출", {"fields": ("availability", "in_stock", "is_featured", "seasonal")}),
        ("이미지", {"fields": ("image_preview", "image", "main_image", "images", "gallery_images", "image_path")}),
        (
            "불꽃놀이 정보",
            {
                "fields": ("effect_type", "duration", "noise_level", "shot_count", "safety_distance"),
                "classes": ("collapse",),
            },
        ),
        ("상세 정보", {"fields": ("description", "description_zh", "rating", "review_count")}),
        (
            "시간 정보",
            {"fields": ("created_at", "updated_at"), "classes": ("collapse",)},
        ),
    )

    def formatted_price(self, obj):
        """가격을 링깃 형식으로 표시"""
        return f"RM{obj.display_price:,.2f}"

    formatted_price.short_description = "가격"
    formatted_price.admin_order_field = "price"

    def image_preview(self, obj):
        """표시 이미지 미리보기"""
        return format_html('<img src="{}" style="max-height: 120px;" />', ProductService.get_image_path(obj, obj.category))

    image_preview.short_description = "미리보기"


# Notification Admin
@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """알림 관리"""

    list_display = ["user", "notification_type", "title", "order_id", "is_read", "created_at"]
    list_filter = ["notification_type", "is_read", "created_at"]
    search_fields = ["user__username", "title", "order_id"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]
    raw_id_fields = ["user"]


# Referral Admin
@admin.register(Referral)
class ReferralAdmin(admin.ModelAdmin):
    """추천 기록 관리"""

    list_display = ["referrer", "referred_user_email", "voucher_awarded", "created_at"]
    list_filter = ["voucher_awarded", "created_at"]
    search_fields = ["referrer__username", "referrer__email", "referred_user_email"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]
    raw_id_fields = ["referrer", "referred_user"]
