import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import shop.models.user


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                (
                    "username",
                    models.CharField(
                        error_messages={"unique": "A user with that username already exists."},
                        help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                        max_length=150,
                        unique=True,
                        validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                        verbose_name="username",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text=(
                            "Designates whether this user should be treated as active. "
                            "Unselect this instead of deleting accounts."
                        ),
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                (
                    "phone_number",
                    models.CharField(
                        blank=True,
                        help_text="012-3456789 형식으로 입력",
                        max_length=15,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="전화번호는 '012-3456789' 형식으로 입력해주세요.",
                                regex="^\\+?6?01\\d-?\\d{7,8}$",
                            )
                        ],
                        verbose_name="전화번호",
                    ),
                ),
                (
                    "referral_code",
                    models.CharField(
                        default=shop.models.user.generate_referral_code,
                        max_length=16,
                        unique=True,
                        verbose_name="추천 코드",
                    ),
                ),
                ("referral_count", models.PositiveIntegerField(default=0, verbose_name="추천 가입 수")),
                ("vouchers", models.PositiveIntegerField(default=0, verbose_name="보유 바우처")),
                ("vouchers_used", models.PositiveIntegerField(default=0, verbose_name="사용한 바우처")),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text=(
                            "The groups this user belongs to. A user will get all permissions "
                            "granted to each of their groups."
                        ),
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
                (
                    "referred_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="referred_users",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="추천인",
                    ),
                ),
            ],
            options={
                "verbose_name": "사용자",
                "verbose_name_plural": "사용자 목록",
                "db_table": "shop_users",
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(db_index=True, max_length=200, verbose_name="상품명")),
                ("name_zh", models.CharField(blank=True, max_length=200, verbose_name="상품명(중국어)")),
                (
                    "product_code",
                    models.CharField(
                        blank=True, help_text="내부 관리용 코드 (관리자 전용)", max_length=50, verbose_name="상품 코드"
                    ),
                ),
                ("category", models.CharField(db_index=True, max_length=100, verbose_name="카테고리")),
                ("subcategory", models.CharField(max_length=100, verbose_name="하위 카테고리")),
                ("description", models.TextField(blank=True, verbose_name="상품 설명")),
                ("description_zh", models.TextField(blank=True, verbose_name="상품 설명(중국어)")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="판매가",
                    ),
                ),
                (
                    "offer_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="is_on_sale 체크 시 적용되는 가격",
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="할인가",
                    ),
                ),
                ("image", models.CharField(blank=True, max_length=500, verbose_name="표시 이미지")),
                ("main_image", models.CharField(blank=True, max_length=500, verbose_name="대표 이미지")),
                ("images", models.JSONField(blank=True, default=list, verbose_name="이미지 목록")),
                ("gallery_images", models.JSONField(blank=True, default=list, verbose_name="추가 이미지")),
                (
                    "image_path",
                    models.CharField(
                        blank=True,
                        help_text="예: hanging-lights/crystal-chandelier-1.jpg",
                        max_length=300,
                        verbose_name="로컬 이미지 경로",
                    ),
                ),
                (
                    "effect_type",
                    models.CharField(
                        blank=True, help_text="Sparkle, Bang, Aerial 등", max_length=50, verbose_name="효과"
                    ),
                ),
                ("duration", models.CharField(blank=True, max_length=50, verbose_name="지속 시간")),
                ("noise_level", models.CharField(blank=True, max_length=20, verbose_name="소음")),
                ("shot_count", models.PositiveIntegerField(blank=True, null=True, verbose_name="발사 횟수")),
                ("safety_distance", models.CharField(blank=True, max_length=50, verbose_name="안전 거리")),
                (
                    "availability",
                    models.CharField(
                        choices=[
                            ("In Stock", "재고 있음"),
                            ("Out of Stock", "품절"),
                            ("Limited Stock", "재고 부족"),
                        ],
                        default="In Stock",
                        max_length=20,
                        verbose_name="재고 상태",
                    ),
                ),
                ("in_stock", models.BooleanField(default=True, verbose_name="재고 여부")),
                ("is_featured", models.BooleanField(default=False, verbose_name="추천 상품")),
                ("is_on_sale", models.BooleanField(default=False, verbose_name="할인 중")),
                ("seasonal", models.BooleanField(default=False, verbose_name="시즌 상품")),
                (
                    "rating",
                    models.DecimalField(
                        blank=True,
                        decimal_places=1,
                        max_digits=2,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(5),
                        ],
                        verbose_name="평점",
                    ),
                ),
                ("review_count", models.PositiveIntegerField(default=0, verbose_name="리뷰 수")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "상품",
                "verbose_name_plural": "상품",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["category", "subcategory"], name="shop_product_cat_subcat_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "notification_type",
                    models.CharField(
                        choices=[("order_status", "주문 상태 변경")],
                        default="order_status",
                        max_length=20,
                        verbose_name="알림 타입",
                    ),
                ),
                ("title", models.CharField(max_length=100, verbose_name="제목")),
                ("message", models.TextField(verbose_name="내용")),
                ("order_id", models.CharField(blank=True, max_length=50, verbose_name="주문 번호")),
                ("is_read", models.BooleanField(default=False, verbose_name="읽음 여부")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="생성 시간")),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="notifications",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="사용자",
                    ),
                ),
            ],
            options={
                "verbose_name": "알림",
                "verbose_name_plural": "알림",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="shop_notif_user_created_idx"),
                    models.Index(fields=["user", "is_read"], name="shop_notif_user_read_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Referral",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("referred_user_email", models.EmailField(max_length=254, verbose_name="가입자 이메일")),
                ("voucher_awarded", models.BooleanField(default=False, verbose_name="바우처 지급 여부")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="가입 일시")),
                (
                    "referrer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="referrals_made",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="추천인",
                    ),
                ),
                (
                    "referred_user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="referral_received",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="가입자",
                    ),
                ),
            ],
            options={
                "verbose_name": "추천 기록",
                "verbose_name_plural": "추천 기록",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["referrer", "-created_at"], name="shop_referral_referrer_idx"),
                ],
            },
        ),
    ]
