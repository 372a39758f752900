from rest_framework import serializers

from ..models.referral import Referral


class ReferralSerializer(serializers.ModelSerializer):
    """추천 가입 기록 Serializer"""

    class Meta:
        model = Referral
        fields = [
            "id",
            "referred_user_email",
            "voucher_awarded",
            "created_at",
        ]
        read_only_fields = fields


class ReferralStatsSerializer(serializers.Serializer):
    """
    추천 통계 Serializer

    ReferralStats DTO를 직렬화합니다.
    total_savings는 사용한 바우처 수 x RM20 입니다.
    """

    total_referrals = serializers.IntegerField(read_only=True)
    available_vouchers = serializers.IntegerField(read_only=True)
    used_vouchers = serializers.IntegerField(read_only=True)
    total_savings = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    referrals = ReferralSerializer(many=True, read_only=True)
