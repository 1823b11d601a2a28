"""
Feedback API Router
"""

from fastapi import APIRouter, Depends

from ..dependencies import SessionUser, get_session_user, get_feedback_service
from ..models import EventFeedback, EventFeedbackCreate
from .service import FeedbackService

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.post("", response_model=EventFeedback)
async def create_event_feedback(
    data: EventFeedbackCreate,
    user: SessionUser = Depends(get_session_user),
    service: FeedbackService = Depends(get_feedback_service)
):
    """이벤트 피드백 제출 (이벤트당 1회)"""
    return await service.create_feedback(data, actor_discord_id=user.discord_user_id)
