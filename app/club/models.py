"""
Club Management Models

Pydantic 모델 정의
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


# =============================================
# Member (회원)
# =============================================

class MemberBase(BaseModel):
    """회원 프로필 공통 필드"""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone_number: Optional[str] = None
    school: str = Field(..., min_length=1)
    level_of_study: str = Field(..., min_length=1)
    gender: Optional[str] = None
    shirt_size: Optional[str] = None
    github_profile_url: Optional[str] = None
    linkedin_profile_url: Optional[str] = None
    website_url: Optional[str] = None
    resume_url: Optional[str] = None
    dob: date
    grad_date: Optional[date] = None

    @field_validator('dob')
    @classmethod
    def validate_dob(cls, v):
        if v and v > date.today():
            raise ValueError('생년월일은 오늘 이전이어야 합니다')
        return v


class MemberCreate(MemberBase):
    """회원 등록 요청 (user_id, age는 서버에서 채움)"""
    pass


class MemberUpdate(MemberBase):
    """회원 수정 요청 (관리자)"""
    id: Optional[str] = None


class Member(BaseModel):
    """회원 정보 응답"""
    id: str
    user_id: str
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    school: Optional[str] = None
    level_of_study: Optional[str] = None
    gender: Optional[str] = None
    shirt_size: Optional[str] = None
    github_profile_url: Optional[str] = None
    linkedin_profile_url: Optional[str] = None
    website_url: Optional[str] = None
    resume_url: Optional[str] = None
    dob: Optional[date] = None
    grad_date: Optional[date] = None
    age: Optional[int] = None
    points: int = 0
    date_created: Optional[datetime] = None

    class Config:
        from_attributes = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# =============================================
# Dues (회비)
# =============================================

class DuesPayment(BaseModel):
    """회비 납부 기록"""
    id: Optional[str] = None
    member_id: str
    amount: float
    payment_date: datetime
    year: int


# =============================================
# Event (이벤트)
# =============================================

class EventBase(BaseModel):
    """이벤트 공통 필드"""
    name: str = Field(..., min_length=1, max_length=200)
    tag: str = Field(..., min_length=1, description="포인트 산정용 카테고리")
    description: str = Field(..., min_length=1)
    start_datetime: datetime
    location: str = Field(..., min_length=1)
    hackathon_id: Optional[str] = None


class EventCreate(EventBase):
    """이벤트 생성 요청 (discord_id, points는 서버에서 채움)"""
    pass


class EventUpdate(EventBase):
    """이벤트 수정 요청 (로컬 저장소만 변경)"""
    id: Optional[str] = None
    points: Optional[int] = Field(None, ge=0)


class Event(BaseModel):
    """이벤트 응답"""
    id: str
    discord_id: str
    name: str
    tag: str
    description: Optional[str] = None
    start_datetime: datetime
    location: Optional[str] = None
    points: int = 0
    hackathon_id: Optional[str] = None

    class Config:
        from_attributes = True


class MemberEvent(Event):
    """회원이 참석한 이벤트 (참석자 수 포함)"""
    num_attended: int = 0


# =============================================
# Check-in (출석)
# =============================================

class CheckInRequest(BaseModel):
    """이벤트 체크인 요청 (QR 스캔 결과)"""
    user_id: str = Field(..., min_length=1)
    event_id: str = Field(..., min_length=1)
    event_points: int = Field(..., ge=0)


class CheckInResponse(BaseModel):
    """체크인 결과"""
    message: str


# =============================================
# Feedback (피드백)
# =============================================

class EventFeedbackCreate(BaseModel):
    """이벤트 피드백 제출"""
    member_id: str = Field(..., min_length=1)
    event_id: str = Field(..., min_length=1)
    overall_event_rating: int = Field(..., ge=1, le=10)
    fun_rating: int = Field(..., ge=1, le=10)
    learned_rating: int = Field(..., ge=1, le=10)
    heard_about_us: str = Field(..., min_length=1)
    additional_feedback: Optional[str] = None
    similar_event: bool = False


class EventFeedback(EventFeedbackCreate):
    """저장된 피드백"""
    id: Optional[str] = None
    created_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    """단순 메시지 응답"""
    message: str
