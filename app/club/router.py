"""
Club Management Router

회원 관리 서비스 메인 라우터
- 회원 / 회비 / 체크인
- 이벤트
- 피드백
"""

from fastapi import APIRouter

from .members.router import router as members_router
from .events.router import router as events_router
from .feedback.router import router as feedback_router

router = APIRouter(prefix="/club", tags=["Club Management"])

router.include_router(members_router)
router.include_router(events_router)
router.include_router(feedback_router)
