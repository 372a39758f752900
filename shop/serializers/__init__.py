"""
shop/serializers/__init__.py

Serializer 모듈의 진입점입니다.

사용 예시:
    from shop.serializers import DeliveryAreaSerializer, NotificationSerializer
"""

# Delivery 관련 Serializers
from .delivery_serializers import DeliveryAreaSerializer

# Notification 관련 Serializers
from .notification_serializers import (
    NotificationListSerializer,
    NotificationMarkReadSerializer,
    NotificationSerializer,
)

# Referral 관련 Serializers
from .referral_serializers import ReferralSerializer, ReferralStatsSerializer

__all__ = [
    "DeliveryAreaSerializer",
    "NotificationListSerializer",
    "NotificationMarkReadSerializer",
    "NotificationSerializer",
    "ReferralSerializer",
    "ReferralStatsSerializer",
]
