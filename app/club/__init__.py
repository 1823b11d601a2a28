"""
Club Management Module

학생 단체 회원 관리 서비스
- 회원 등록 (QR 코드 발급)
- 회비 납부 기록
- 이벤트 생성 (Discord 게시) 및 체크인 포인트 적립
- 이벤트 피드백
"""

from .exceptions import (
    ClubError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    ExternalServiceError,
    DuplicateRowError,
)
from .age import calculate_age

__all__ = [
    "ClubError",
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ExternalServiceError",
    "DuplicateRowError",
    "calculate_age",
]
