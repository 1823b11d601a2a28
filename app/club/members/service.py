"""
Member Service

회원 등록/수정, 회비 납부 기록, 이벤트 체크인
"""

from collections import Counter
from datetime import date, datetime, timezone
from typing import Optional, List

from loguru import logger

from app.config import ClubSettings, get_settings
from app.integrations.qr_storage import QRCodeStorage
from ..age import calculate_age
from ..exceptions import BadRequestError, ConflictError, DuplicateRowError, NotFoundError
from ..models import (
    CheckInResponse,
    DuesPayment,
    Member,
    MemberCreate,
    MemberEvent,
    MemberUpdate,
)
from ..store import ClubStore

DUES_ID_REQUIRED = "Member ID is required to update dues paying status!"


class MemberService:
    """회원 서비스"""

    def __init__(
        self,
        store: ClubStore,
        qr_storage: Optional[QRCodeStorage] = None,
        settings: Optional[ClubSettings] = None
    ):
        self.store = store
        self.qr_storage = qr_storage
        self.settings = settings or get_settings()

    # =============================================
    # 회원 등록 및 관리
    # =============================================

    async def create_member(
        self,
        user_id: str,
        data: MemberCreate,
        today: Optional[date] = None
    ) -> Member:
        """
        회원 등록 (본인)

        - 계정당 회원 1명
        - 신규 계정이면 QR 코드 생성 (실패해도 등록은 계속)
        - 나이는 생년월일로 계산
        """
        if self.store.find_members_by_user(user_id):
            raise ConflictError("Member already exists for this user!")

        if self.qr_storage is not None:
            self.qr_storage.provision(user_id)

        record = data.model_dump(mode="json")
        record["user_id"] = user_id
        record["age"] = calculate_age(data.dob, today)

        try:
            row = self.store.insert_member(record)
        except DuplicateRowError:
            raise ConflictError("Member already exists for this user!")

        logger.info(f"회원 등록: {data.first_name} {data.last_name} ({user_id})")
        return Member.model_validate(row)

    async def update_member(
        self,
        data: MemberUpdate,
        today: Optional[date] = None
    ) -> None:
        """
        회원 정보 수정 (관리자)

        - 보낸 필드만 변경 (생략한 선택 필드는 기존 값 유지)
        - resume_url이 비어 있으면 기존 값 유지
        - 나이 재계산
        """
        if not data.id:
            raise BadRequestError("Member ID is required to update a member!")

        member = self.store.find_member(data.id)
        if not member:
            raise NotFoundError("Member not found!")

        update_data = data.model_dump(mode="json", exclude={"id"}, exclude_unset=True)
        update_data["resume_url"] = data.resume_url or member.get("resume_url")
        update_data["age"] = calculate_age(data.dob, today)

        self.store.update_member(data.id, update_data)
        logger.info(f"회원 수정: {data.id}")

    async def delete_member(self, member_id: Optional[str]) -> None:
        """회원 삭제 (관리자)"""
        if not member_id:
            raise BadRequestError("Member ID is required to delete a member!")

        self.store.delete_member(member_id)
        logger.info(f"회원 삭제: {member_id}")

    async def get_member(self, user_id: str) -> Optional[Member]:
        """로그인한 계정의 회원 정보 (미등록이면 None)"""
        rows = self.store.find_members_by_user(user_id)
        if not rows:
            return None
        return Member.model_validate(rows[-1])

    async def list_members(self) -> List[Member]:
        return [Member.model_validate(row) for row in self.store.list_members()]

    async def list_member_events(self, user_id: str) -> List[MemberEvent]:
        """
        회원이 참석한 이벤트 목록

        해커톤 소속 이벤트는 제외. num_attended는 이 회원의 해당 이벤트 출석 행 수
        """
        member = await self.get_member(user_id)
        if not member:
            return []

        event_ids = self.store.list_attended_event_ids(member.id)
        events = [
            e for e in self.store.list_events_by_ids(event_ids)
            if not e.get("hackathon_id")
        ]
        counts = Counter(event_ids)

        return [
            MemberEvent.model_validate({**e, "num_attended": counts.get(e["id"], 0)})
            for e in events
        ]

    # =============================================
    # 회비
    # =============================================

    async def list_dues_paying_members(self) -> List[Member]:
        """회비 납부 회원 (납부 기록 존재 여부로 판단)"""
        return [
            Member.model_validate(row)
            for row in self.store.list_dues_paying_members()
        ]

    async def mark_dues_paid(
        self,
        member_id: Optional[str],
        now: Optional[datetime] = None
    ) -> DuesPayment:
        """회비 납부 기록 추가 (관리자)"""
        if not member_id:
            raise BadRequestError(DUES_ID_REQUIRED)

        now = now or datetime.now(timezone.utc)
        payment = DuesPayment(
            member_id=member_id,
            amount=self.settings.dues_payment,
            payment_date=now,
            year=now.year
        )
        row = self.store.insert_dues_payment(
            payment.model_dump(mode="json", exclude={"id"})
        )
        logger.info(f"회비 납부 처리: {member_id} ({now.year})")
        return DuesPayment.model_validate(row)

    async def clear_dues_paid(self, member_id: Optional[str]) -> None:
        """회원의 회비 납부 기록 삭제 (관리자)"""
        if not member_id:
            raise BadRequestError(DUES_ID_REQUIRED)

        self.store.delete_dues_payments(member_id)
        logger.info(f"회비 납부 취소: {member_id}")

    async def clear_all_dues(self) -> None:
        """모든 회비 납부 기록 삭제 (연도 무관, 되돌릴 수 없음)"""
        self.store.delete_all_dues_payments()
        logger.warning("전체 회비 납부 기록 삭제")

    # =============================================
    # 이벤트 체크인
    # =============================================

    async def check_in(
        self,
        user_id: str,
        event_id: str,
        event_points: int
    ) -> Optional[CheckInResponse]:
        """
        이벤트 체크인 (QR 스캔)

        - 미등록 계정이면 None
        - 회원-이벤트 쌍당 1회만 허용 (중복이면 ConflictError)
        - 출석 기록과 포인트 적립은 저장소에서 한 트랜잭션
        """
        rows = self.store.find_members_by_user(user_id)
        if not rows:
            logger.warning(f"체크인 대상 회원 없음: {user_id}")
            return None

        member = Member.model_validate(rows[0])
        already_checked_in = f"{member.full_name} is already checked in for the event"

        if self.store.find_attendee(member.id, event_id):
            raise ConflictError(already_checked_in)

        try:
            self.store.record_check_in(member.id, event_id, event_points)
        except DuplicateRowError:
            raise ConflictError(already_checked_in)

        logger.info(f"체크인 완료: {member.full_name} → {event_id} (+{event_points})")
        return CheckInResponse(
            message=f"{member.full_name} has been checked in for the event"
        )
