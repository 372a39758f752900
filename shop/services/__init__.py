"""
쇼핑몰 비즈니스 로직 서비스 패키지

서비스 레이어 패턴:
- 뷰와 모델 사이의 비즈니스 로직 계층
- 뷰는 HTTP 요청/응답만 처리하고 로직은 서비스에 위임
"""

from .base import ServiceError, log_service_call
from .delivery_service import DELIVERY_AREAS, DeliveryArea, DeliveryService
from .notification_service import NotificationService, NotificationServiceError
from .product_service import ProductService
from .referral_service import ReferralService, ReferralServiceError, ReferralStats

__all__ = [
    # Base
    "ServiceError",
    "log_service_call",
    # Services
    "DELIVERY_AREAS",
    "DeliveryArea",
    "DeliveryService",
    "NotificationService",
    "NotificationServiceError",
    "ProductService",
    "ReferralService",
    "ReferralServiceError",
    "ReferralStats",
]
