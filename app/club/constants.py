"""
Club 상수 정의
"""

# 이벤트 태그별 포인트 (등록되지 않은 태그는 0점)
EVENT_POINTS = {
    "GBM": 10,
    "Workshop": 15,
    "Social": 5,
    "Kickstart": 20,
    "Project Launch": 20,
    "Hello World": 15,
    "Sponsorship": 10,
    "Tech Exploration": 15,
    "Class Support": 10,
    "Collabs": 10,
    "OPS": 5,
}

# 외부 게시 이벤트 기본 길이 (시간)
EVENT_DURATION_HOURS = 3

# Discord guild scheduled event 값
DISCORD_PRIVACY_GUILD_ONLY = 2
DISCORD_ENTITY_EXTERNAL = 3

# 로그 임베드 색상
LOG_COLORS = {
    "tk_blue": 0x1D4ED8,
    "tk_green": 0x16A34A,
    "tk_red": 0xDC2626,
    "tk_purple": 0x7C3AED,
}

# QR 코드 파일명 / 페이로드
QR_OBJECT_NAME = "qr-code-{user_id}.png"
QR_PAYLOAD = "user:{user_id}"

# 테이블명
MEMBERS_TABLE = "members"
EVENTS_TABLE = "events"
ATTENDEES_TABLE = "event_attendees"
FEEDBACK_TABLE = "event_feedback"
DUES_TABLE = "dues_payments"
