"""
Event API Router (관리자 전용)
"""

from typing import List
from fastapi import APIRouter, Depends

from ..dependencies import SessionUser, require_admin, get_event_service
from ..models import Event, EventCreate, EventUpdate, MessageResponse
from .service import EventService

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=List[Event])
async def list_events(
    admin: SessionUser = Depends(require_admin),
    service: EventService = Depends(get_event_service)
):
    """전체 이벤트 (최신순)"""
    return await service.list_events()


@router.post("", response_model=Event)
async def create_event(
    data: EventCreate,
    admin: SessionUser = Depends(require_admin),
    service: EventService = Depends(get_event_service)
):
    """
    이벤트 생성

    Discord 게시 실패 시 저장하지 않고 500
    """
    return await service.create_event(data)


@router.put("", response_model=MessageResponse)
async def update_event(
    data: EventUpdate,
    admin: SessionUser = Depends(require_admin),
    service: EventService = Depends(get_event_service)
):
    await service.update_event(data)
    return MessageResponse(message="Event updated")


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    admin: SessionUser = Depends(require_admin),
    service: EventService = Depends(get_event_service)
):
    await service.delete_event(event_id)
    return MessageResponse(message="Event deleted")
