"""추천 API (통계, 추천 코드 확인)"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import permissions, serializers as drf_serializers
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ..serializers.referral_serializers import ReferralStatsSerializer
from ..services.referral_service import ReferralService, ReferralServiceError
from .mixins import ServiceErrorResponseMixin


class ReferralStatsResponseSerializer(ReferralStatsSerializer):
    """추천 통계 응답 (추천 코드/링크 포함)"""

    referral_code = drf_serializers.CharField()
    referral_link = drf_serializers.URLField()
    whatsapp_share_link = drf_serializers.CharField()
    email_share_link = drf_serializers.CharField()


class ReferralStatsView(ServiceErrorResponseMixin, APIView):
    """
    내 추천 통계

    GET /api/referrals/stats/ (인증 필요)
    """

    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        responses={200: ReferralStatsResponseSerializer},
        summary="내 추천 통계를 조회한다.",
        description="""처리 내용:
- 추천 가입 수, 보유/사용 바우처, 절약 금액, 추천 기록을 반환한다.
- 공유용 추천 링크와 WhatsApp/이메일 공유 링크를 함께 반환한다.""",
        tags=["Referrals"],
    )
    def get(self, request: Request) -> Response:
        try:
            stats = ReferralService.get_stats(request.user)
        except ReferralServiceError as e:
            return self.service_error_response(e)

        code = request.user.referral_code
        user_name = request.user.get_full_name() or None
        return Response({
            **ReferralStatsSerializer(stats).data,
            "referral_code": code,
            "referral_link": ReferralService.get_referral_link(code),
            "whatsapp_share_link": ReferralService.get_whatsapp_share_link(code, user_name),
            "email_share_link": ReferralService.get_email_share_link(code, user_name),
        })


class ReferralCodeValidationSerializer(drf_serializers.Serializer):
    """추천 코드 확인 응답"""

    code = drf_serializers.CharField()
    valid = drf_serializers.BooleanField()


class ReferralCodeValidateView(APIView):
    """
    추천 코드 확인 (가입 화면)

    GET /api/referrals/validate/?code=FW-ABC123 (누구나)
    """

    permission_classes = [permissions.AllowAny]

    @extend_schema(
        parameters=[OpenApiParameter("code", str, description="확인할 추천 코드 (대소문자/공백 무시)")],
        responses={200: ReferralCodeValidationSerializer},
        summary="추천 코드가 유효한지 확인한다.",
        tags=["Referrals"],
    )
    def get(self, request: Request) -> Response:
        code = ReferralService.normalize_referral_code(request.query_params.get("code"))
        return Response({"code": code, "valid": ReferralService.validate_referral_code(code)})
