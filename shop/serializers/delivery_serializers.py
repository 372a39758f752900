from rest_framework import serializers


class DeliveryAreaSerializer(serializers.Serializer):
    """
    배송 지역 Serializer (읽기 전용)

    DeliveryArea 데이터클래스를 직렬화합니다.
    결제 화면의 배송 지역 선택 목록에 사용됩니다.
    """

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    fee = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
