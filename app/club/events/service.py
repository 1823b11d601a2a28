"""
Event Service

이벤트 생성(Discord 게시 후 저장), 수정, 삭제
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, List

from loguru import logger

from app.integrations.discord import DiscordClient
from ..constants import EVENT_DURATION_HOURS, EVENT_POINTS
from ..exceptions import BadRequestError, ExternalServiceError
from ..models import Event, EventCreate, EventUpdate
from ..store import ClubStore


def _to_utc_iso(value: datetime) -> str:
    """naive datetime은 UTC로 간주"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class EventService:
    """이벤트 서비스"""

    def __init__(self, store: ClubStore, discord: DiscordClient):
        self.store = store
        self.discord = discord

    async def list_events(self) -> List[Event]:
        """전체 이벤트 (최신순)"""
        return [Event.model_validate(row) for row in self.store.list_events()]

    async def create_event(self, data: EventCreate) -> Event:
        """
        이벤트 생성

        1. Discord 길드 이벤트로 먼저 게시 (시작 + 3시간)
        2. 받은 discord_id와 태그별 포인트로 저장

        게시 실패 또는 ID 없음이면 저장하지 않고 ExternalServiceError
        """
        start = data.start_datetime
        end = start + timedelta(hours=EVENT_DURATION_HOURS)

        discord_id = None
        try:
            discord_id = await self.discord.create_scheduled_event(
                description=data.description,
                name=data.name,
                start_iso=_to_utc_iso(start),
                end_iso=_to_utc_iso(end),
                location=data.location
            )
        except Exception as e:
            logger.error(f"Discord 이벤트 게시 오류: {e}")

        if not discord_id:
            raise ExternalServiceError("Failed to create event in external service")

        record = data.model_dump(mode="json")
        record["points"] = EVENT_POINTS.get(data.tag, 0)
        record["discord_id"] = discord_id

        row = self.store.insert_event(record)
        logger.info(f"이벤트 생성: {data.name} (discord_id={discord_id}, points={record['points']})")
        return Event.model_validate(row)

    async def update_event(self, data: EventUpdate) -> None:
        """이벤트 수정 (로컬 저장소만, Discord 재동기화 없음)"""
        if not data.id:
            raise BadRequestError("Event ID is required to update an event")

        update_data = data.model_dump(mode="json", exclude={"id"}, exclude_none=True)
        self.store.update_event(data.id, update_data)
        logger.info(f"이벤트 수정: {data.id}")

    async def delete_event(self, event_id: Optional[str]) -> None:
        """이벤트 삭제 (로컬 저장소만)"""
        if not event_id:
            raise BadRequestError("Event ID is required to delete an event")

        self.store.delete_event(event_id)
        logger.info(f"이벤트 삭제: {event_id}")
