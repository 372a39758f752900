"""
Image CDN Configuration (Cloudinary)
상품 이미지 호스팅 관련 설정을 관리합니다.
"""

import os

# ==========================================
# Cloudinary 설정
# ==========================================
#
# Cloudinary 콘솔 > Settings > API Keys 에서 발급받은 값을 환경변수로 설정하세요.
#
# .env 파일 예시:
# CLOUDINARY_CLOUD_NAME=fireworks-ml
# CLOUDINARY_API_KEY=1234567890
# CLOUDINARY_API_SECRET=...

CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME", "")
CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY", "")
CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET", "")

# 업로드 대상 폴더
CLOUDINARY_UPLOAD_FOLDER = os.environ.get("CLOUDINARY_UPLOAD_FOLDER", "lighting-products")

# 이미지 URL 기본 변환 옵션 (호출 시 개별 옵션으로 덮어쓸 수 있음)
CLOUDINARY_DEFAULT_IMAGE_OPTIONS = {
    "fetch_format": "auto",
    "quality": "auto",
    "crop": "fill",
    "gravity": "auto",
    "width": 400,
    "height": 400,
}
