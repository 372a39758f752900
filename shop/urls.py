from django.urls import include, path

from rest_framework.routers import DefaultRouter

from shop.views.delivery_views import DeliveryAreaViewSet
from shop.views.notification_views import NotificationViewSet
from shop.views.referral_views import ReferralCodeValidateView, ReferralStatsView

# DRF의 라우터 생성
router = DefaultRouter()

# 배송 지역 라우터
router.register(r"delivery-areas", DeliveryAreaViewSet, basename="delivery-area")

# 알림 라우터
router.register(r"notifications", NotificationViewSet, basename="notification")

# URL 패턴 정의
urlpatterns = [
    path("", include(router.urls)),
    # 추천 통계
    path("referrals/stats/", ReferralStatsView.as_view(), name="referral-stats"),
    path("referrals/validate/", ReferralCodeValidateView.as_view(), name="referral-validate"),
]
