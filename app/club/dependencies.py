"""
Club Management Dependencies

인증, 권한 체크, 서비스 주입 의존성
"""

from typing import Optional
from fastapi import Depends, HTTPException, status, Request

from app.integrations.discord import DiscordClient, get_discord_client
from app.integrations.qr_storage import QRCodeStorage, get_qr_storage
from .events.service import EventService
from .feedback.service import FeedbackService
from .members.service import MemberService
from .store import ClubStore

ADMIN_ROLE = "admin"


class SessionUser:
    """로그인한 계정 컨텍스트 (Supabase Auth)"""

    def __init__(
        self,
        user_id: str,
        discord_user_id: Optional[str] = None,
        role: Optional[str] = None
    ):
        self.user_id = user_id
        self.discord_user_id = discord_user_id
        self.role = role

    def is_admin(self) -> bool:
        """관리자 권한인지"""
        return self.role == ADMIN_ROLE


async def get_session_user(request: Request) -> SessionUser:
    """
    현재 로그인한 계정 조회

    Authorization: Bearer <Supabase access token>
    토큰 발급은 Supabase Auth (Discord OAuth)가 담당
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required"
        )

    from database.supabase_client import get_supabase_client

    token = auth_header.split(" ")[1]

    try:
        supabase = get_supabase_client()
        user_response = supabase.auth.get_user(token)

        if not user_response or not user_response.user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token"
            )

        user = user_response.user
        user_metadata = user.user_metadata or {}
        app_metadata = user.app_metadata or {}

        return SessionUser(
            user_id=user.id,
            discord_user_id=user_metadata.get("provider_id"),
            role=app_metadata.get("role")
        )

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication error: {str(e)}"
        )


def require_admin(user: SessionUser = Depends(get_session_user)) -> SessionUser:
    """관리자 권한 필요"""
    if not user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin permission required"
        )
    return user


# =============================================
# 서비스 주입
# =============================================

def get_store() -> ClubStore:
    from database.supabase_client import get_club_store
    return get_club_store()


def get_member_service(
    store: ClubStore = Depends(get_store),
    qr_storage: QRCodeStorage = Depends(get_qr_storage)
) -> MemberService:
    return MemberService(store, qr_storage)


def get_event_service(
    store: ClubStore = Depends(get_store),
    discord: DiscordClient = Depends(get_discord_client)
) -> EventService:
    return EventService(store, discord)


def get_feedback_service(
    store: ClubStore = Depends(get_store),
    discord: DiscordClient = Depends(get_discord_client)
) -> FeedbackService:
    return FeedbackService(store, discord)
