"""
Member Module

- 회원 등록/수정/삭제
- 회비 납부 기록
- 이벤트 체크인 및 포인트 적립
"""

from .service import MemberService

__all__ = ["MemberService"]
