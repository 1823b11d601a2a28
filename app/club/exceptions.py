"""
Club 도메인 예외
"""


class ClubError(Exception):
    """비즈니스 규칙 위반 기본 예외"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ClubError):
    """필수 식별자 누락"""
    status_code = 400


class ForbiddenError(ClubError):
    """허용되지 않는 요청 (중복 피드백 등)"""
    status_code = 403


class NotFoundError(ClubError):
    """참조 대상 없음"""
    status_code = 404


class ConflictError(ClubError):
    """중복 체크인"""
    status_code = 409


class ExternalServiceError(ClubError):
    """외부 서비스 실패 (복구 불가)"""
    status_code = 500


class DuplicateRowError(Exception):
    """저장소의 유니크 제약 위반"""
