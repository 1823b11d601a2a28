"""
Club 저장소 인터페이스

워크플로우는 이 프로토콜에만 의존한다.
운영 구현은 database.supabase_client.SupabaseClubStore
"""

from typing import Any, Dict, List, Optional, Protocol

Row = Dict[str, Any]


class ClubStore(Protocol):
    """회원/이벤트/출석/피드백/회비 저장소"""

    # ==================== 회원 ====================

    def find_member(self, member_id: str) -> Optional[Row]: ...

    def find_members_by_user(self, user_id: str) -> List[Row]: ...

    def list_members(self) -> List[Row]: ...

    def insert_member(self, data: Row) -> Row: ...

    def update_member(self, member_id: str, data: Row) -> None: ...

    def delete_member(self, member_id: str) -> None: ...

    # ==================== 회비 ====================

    def list_dues_paying_members(self) -> List[Row]: ...

    def insert_dues_payment(self, data: Row) -> Row: ...

    def delete_dues_payments(self, member_id: str) -> None: ...

    def delete_all_dues_payments(self) -> None: ...

    # ==================== 이벤트 ====================

    def find_event(self, event_id: str) -> Optional[Row]: ...

    def list_events(self) -> List[Row]: ...

    def list_events_by_ids(self, event_ids: List[str]) -> List[Row]: ...

    def insert_event(self, data: Row) -> Row: ...

    def update_event(self, event_id: str, data: Row) -> None: ...

    def delete_event(self, event_id: str) -> None: ...

    # ==================== 출석 ====================

    def find_attendee(self, member_id: str, event_id: str) -> Optional[Row]: ...

    def record_check_in(self, member_id: str, event_id: str, amount: int) -> None:
        """
        출석 행 삽입 + points = points + amount 를 한 트랜잭션으로

        중복 (member_id, event_id)이면 DuplicateRowError, 포인트는 변하지 않음
        """
        ...

    def list_attended_event_ids(self, member_id: str) -> List[str]: ...

    # ==================== 피드백 ====================

    def find_feedback(self, member_id: str, event_id: str) -> Optional[Row]: ...

    def insert_feedback(self, data: Row) -> Row:
        """중복 (member_id, event_id)이면 DuplicateRowError"""
        ...
