"""
Member API Router

회원 등록/조회, 회비, 이벤트 체크인 API
"""

from typing import Optional, List
from fastapi import APIRouter, Depends

from ..dependencies import (
    SessionUser,
    get_session_user,
    require_admin,
    get_member_service,
)
from ..models import (
    CheckInRequest,
    CheckInResponse,
    DuesPayment,
    Member,
    MemberCreate,
    MemberEvent,
    MemberUpdate,
    MessageResponse,
)
from .service import MemberService

router = APIRouter(prefix="/members", tags=["Members"])


# =============================================
# 회원 (본인)
# =============================================

@router.post("", response_model=Member)
async def create_member(
    data: MemberCreate,
    user: SessionUser = Depends(get_session_user),
    service: MemberService = Depends(get_member_service)
):
    """회원 등록 (본인 계정)"""
    return await service.create_member(user.user_id, data)


@router.get("/me", response_model=Optional[Member])
async def get_member(
    user: SessionUser = Depends(get_session_user),
    service: MemberService = Depends(get_member_service)
):
    """내 회원 정보 (미등록이면 null)"""
    return await service.get_member(user.user_id)


@router.get("/me/events", response_model=List[MemberEvent])
async def get_member_events(
    user: SessionUser = Depends(get_session_user),
    service: MemberService = Depends(get_member_service)
):
    """내가 참석한 이벤트 (해커톤 이벤트 제외)"""
    return await service.list_member_events(user.user_id)


@router.get("", response_model=List[Member])
async def list_members(
    user: SessionUser = Depends(get_session_user),
    service: MemberService = Depends(get_member_service)
):
    """전체 회원 목록"""
    return await service.list_members()


# =============================================
# 회비
# =============================================

@router.get("/dues", response_model=List[Member])
async def list_dues_paying_members(
    user: SessionUser = Depends(get_session_user),
    service: MemberService = Depends(get_member_service)
):
    """회비 납부 회원 목록"""
    return await service.list_dues_paying_members()


@router.delete("/dues", response_model=MessageResponse)
async def clear_all_dues(
    admin: SessionUser = Depends(require_admin),
    service: MemberService = Depends(get_member_service)
):
    """전체 회비 기록 초기화 (관리자)"""
    await service.clear_all_dues()
    return MessageResponse(message="All dues payments cleared")


@router.post("/{member_id}/dues", response_model=DuesPayment)
async def create_dues_paying_member(
    member_id: str,
    admin: SessionUser = Depends(require_admin),
    service: MemberService = Depends(get_member_service)
):
    """회비 납부 처리 (관리자)"""
    return await service.mark_dues_paid(member_id)


@router.delete("/{member_id}/dues", response_model=MessageResponse)
async def delete_dues_paying_member(
    member_id: str,
    admin: SessionUser = Depends(require_admin),
    service: MemberService = Depends(get_member_service)
):
    """회비 납부 취소 (관리자)"""
    await service.clear_dues_paid(member_id)
    return MessageResponse(message="Dues payment removed")


# =============================================
# 체크인
# =============================================

@router.post("/check-in", response_model=Optional[CheckInResponse])
async def event_check_in(
    data: CheckInRequest,
    admin: SessionUser = Depends(require_admin),
    service: MemberService = Depends(get_member_service)
):
    """
    이벤트 체크인 (관리자가 QR 스캔)

    등록되지 않은 계정이면 null 반환
    """
    return await service.check_in(data.user_id, data.event_id, data.event_points)


# =============================================
# 회원 관리 (관리자)
# =============================================

@router.put("", response_model=MessageResponse)
async def update_member(
    data: MemberUpdate,
    admin: SessionUser = Depends(require_admin),
    service: MemberService = Depends(get_member_service)
):
    """회원 정보 수정 (관리자)"""
    await service.update_member(data)
    return MessageResponse(message="Member updated")


@router.delete("/{member_id}", response_model=MessageResponse)
async def delete_member(
    member_id: str,
    admin: SessionUser = Depends(require_admin),
    service: MemberService = Depends(get_member_service)
):
    """회원 삭제 (관리자)"""
    await service.delete_member(member_id)
    return MessageResponse(message="Member deleted")
