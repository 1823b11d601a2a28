"""
Feedback Service

이벤트 피드백 제출 (회원-이벤트 쌍당 1회)
"""

from typing import Optional

from loguru import logger

from app.integrations.discord import DiscordClient
from ..exceptions import DuplicateRowError, ForbiddenError, NotFoundError
from ..models import EventFeedback, EventFeedbackCreate
from ..store import ClubStore

ALREADY_GAVE_FEEDBACK = "Cannot give feedback more than once for this event!"


class FeedbackService:
    """피드백 서비스"""

    def __init__(self, store: ClubStore, discord: Optional[DiscordClient] = None):
        self.store = store
        self.discord = discord

    async def create_feedback(
        self,
        data: EventFeedbackCreate,
        actor_discord_id: Optional[str] = None
    ) -> EventFeedback:
        """
        피드백 제출

        중복 확인이 존재 확인보다 먼저다. 이미 제출한 쌍이면
        이벤트/회원이 없어도 ForbiddenError.
        """
        if self.store.find_feedback(data.member_id, data.event_id):
            raise ForbiddenError(ALREADY_GAVE_FEEDBACK)

        event = self.store.find_event(data.event_id)
        member = self.store.find_member(data.member_id)

        if not event:
            raise NotFoundError("Event not found!")

        if not member:
            raise NotFoundError("Member not found!")

        try:
            row = self.store.insert_feedback(data.model_dump(mode="json"))
        except DuplicateRowError:
            raise ForbiddenError(ALREADY_GAVE_FEEDBACK)

        full_name = f"{member['first_name']} {member['last_name']}"
        logger.info(f"피드백 제출: {full_name} → {event['name']}")

        if self.discord is not None:
            await self.discord.log(
                title="Feedback Given",
                message=f"{full_name} gave feedback for {event['name']}!",
                color="tk_blue",
                user_id=actor_discord_id
            )

        return EventFeedback.model_validate(row)
