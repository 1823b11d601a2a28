"""
Club Config - 서비스 설정
"""
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

load_dotenv()


class ClubSettings(BaseSettings):
    """클럽 서비스 설정"""

    # Supabase
    supabase_url: str = Field(default="", description="Supabase Project URL")
    supabase_key: str = Field(default="", description="Supabase service key")

    # Discord (이벤트 게시 + 로그 채널)
    discord_api_url: str = Field(default="https://discord.com/api/v10")
    discord_bot_token: str = Field(default="", description="Discord 봇 토큰")
    discord_guild_id: str = Field(default="", description="이벤트를 게시할 길드 ID")
    discord_log_channel_id: str = Field(default="", description="알림 로그 채널 ID")
    discord_timeout: float = Field(default=10.0, description="요청 타임아웃 (초)")

    # QR 코드 스토리지
    qr_bucket_name: str = Field(default="member-qr-codes")

    # 회비
    dues_payment: float = Field(default=25.0, description="연회비 금액")

    # 로깅
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="logs")

    class Config:
        env_file = ".env"
        env_prefix = ""
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> ClubSettings:
    return ClubSettings()
