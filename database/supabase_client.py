"""
Supabase 데이터베이스 클라이언트
"""
from typing import Any, Dict, List, Optional

from loguru import logger
from postgrest.exceptions import APIError
from supabase import create_client, Client

from app.config import get_settings
from app.club.constants import (
    ATTENDEES_TABLE,
    DUES_TABLE,
    EVENTS_TABLE,
    FEEDBACK_TABLE,
    MEMBERS_TABLE,
)
from app.club.exceptions import DuplicateRowError

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"

# 전체 삭제 시 PostgREST가 요구하는 필터용 (어떤 행과도 일치하지 않는 id)
NIL_UUID = "00000000-0000-0000-0000-000000000000"

Row = Dict[str, Any]


# 싱글톤 클라이언트
_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Supabase 클라이언트 인스턴스 반환 (싱글톤)
    """
    global _supabase_client
    if _supabase_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_key:
            raise ValueError("SUPABASE_URL과 SUPABASE_KEY 환경변수를 설정해주세요")
        _supabase_client = create_client(
            settings.supabase_url,
            settings.supabase_key
        )
    return _supabase_client


class SupabaseClubStore:
    """Supabase 기반 ClubStore 구현"""

    def __init__(self, client: Optional[Client] = None):
        self.client: Client = client or get_supabase_client()

    def _first(self, response) -> Optional[Row]:
        return response.data[0] if response.data else None

    def _execute(self, target: str, query):
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.warning(f"{target} 유니크 제약 위반: {e.message}")
                raise DuplicateRowError(f"{target}: {e.message}") from e
            raise

    def _insert(self, table: str, data: Row) -> Row:
        response = self._execute(table, self.client.table(table).insert(data))
        return response.data[0] if response.data else data

    # ==================== 회원 관련 ====================

    def find_member(self, member_id: str) -> Optional[Row]:
        response = self.client.table(MEMBERS_TABLE).select("*").eq(
            "id", member_id
        ).limit(1).execute()
        return self._first(response)

    def find_members_by_user(self, user_id: str) -> List[Row]:
        response = self.client.table(MEMBERS_TABLE).select("*").eq(
            "user_id", user_id
        ).order("date_created").execute()
        return response.data or []

    def list_members(self) -> List[Row]:
        response = self.client.table(MEMBERS_TABLE).select("*").execute()
        return response.data or []

    def insert_member(self, data: Row) -> Row:
        return self._insert(MEMBERS_TABLE, data)

    def update_member(self, member_id: str, data: Row) -> None:
        self.client.table(MEMBERS_TABLE).update(data).eq("id", member_id).execute()

    def delete_member(self, member_id: str) -> None:
        self.client.table(MEMBERS_TABLE).delete().eq("id", member_id).execute()

    # ==================== 회비 관련 ====================

    def list_dues_paying_members(self) -> List[Row]:
        """회비 납부 기록이 하나라도 있는 회원 (inner join)"""
        response = self.client.table(MEMBERS_TABLE).select(
            f"*, {DUES_TABLE}!inner(id)"
        ).execute()

        members = []
        for row in response.data or []:
            row = dict(row)
            row.pop(DUES_TABLE, None)
            members.append(row)
        return members

    def insert_dues_payment(self, data: Row) -> Row:
        return self._insert(DUES_TABLE, data)

    def delete_dues_payments(self, member_id: str) -> None:
        self.client.table(DUES_TABLE).delete().eq("member_id", member_id).execute()

    def delete_all_dues_payments(self) -> None:
        self.client.table(DUES_TABLE).delete().neq("id", NIL_UUID).execute()

    # ==================== 이벤트 관련 ====================

    def find_event(self, event_id: str) -> Optional[Row]:
        response = self.client.table(EVENTS_TABLE).select("*").eq(
            "id", event_id
        ).limit(1).execute()
        return self._first(response)

    def list_events(self) -> List[Row]:
        response = self.client.table(EVENTS_TABLE).select("*").order(
            "start_datetime", desc=True
        ).execute()
        return response.data or []

    def list_events_by_ids(self, event_ids: List[str]) -> List[Row]:
        if not event_ids:
            return []
        response = self.client.table(EVENTS_TABLE).select("*").in_(
            "id", event_ids
        ).execute()
        return response.data or []

    def insert_event(self, data: Row) -> Row:
        return self._insert(EVENTS_TABLE, data)

    def update_event(self, event_id: str, data: Row) -> None:
        self.client.table(EVENTS_TABLE).update(data).eq("id", event_id).execute()

    def delete_event(self, event_id: str) -> None:
        self.client.table(EVENTS_TABLE).delete().eq("id", event_id).execute()

    # ==================== 출석 관련 ====================

    def find_attendee(self, member_id: str, event_id: str) -> Optional[Row]:
        response = self.client.table(ATTENDEES_TABLE).select("*").eq(
            "member_id", member_id
        ).eq("event_id", event_id).limit(1).execute()
        return self._first(response)

    def record_check_in(self, member_id: str, event_id: str, amount: int) -> None:
        """
        출석 기록 + 포인트 적립

        check_in_member() Postgres 함수가 event_attendees insert와
        points = points + amount update를 한 트랜잭션으로 실행한다.
        출석 행이 중복이면 23505로 전체 롤백.
        """
        self._execute(ATTENDEES_TABLE, self.client.rpc(
            "check_in_member",
            {"target_member_id": member_id, "target_event_id": event_id, "amount": amount}
        ))

    def list_attended_event_ids(self, member_id: str) -> List[str]:
        response = self.client.table(ATTENDEES_TABLE).select("event_id").eq(
            "member_id", member_id
        ).execute()
        return [row["event_id"] for row in response.data or []]

    # ==================== 피드백 관련 ====================

    def find_feedback(self, member_id: str, event_id: str) -> Optional[Row]:
        response = self.client.table(FEEDBACK_TABLE).select("id").eq(
            "member_id", member_id
        ).eq("event_id", event_id).limit(1).execute()
        return self._first(response)

    def insert_feedback(self, data: Row) -> Row:
        return self._insert(FEEDBACK_TABLE, data)


def get_club_store() -> SupabaseClubStore:
    """FastAPI 의존성용 저장소 생성"""
    return SupabaseClubStore(get_supabase_client())
