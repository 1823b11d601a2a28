"""
Pytest configuration and fixtures for Club Membership tests
"""

import sys
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import ClubSettings  # noqa: E402
from tests.fakes import InMemoryClubStore, make_member_row, make_event_row  # noqa: E402


@pytest.fixture
def store():
    """빈 인메모리 저장소"""
    return InMemoryClubStore()


@pytest.fixture
def settings():
    """테스트용 설정"""
    return ClubSettings(
        supabase_url="http://localhost:54321",
        supabase_key="test-key",
        discord_bot_token="test-bot-token",
        discord_guild_id="guild-1",
        discord_log_channel_id="channel-1",
        dues_payment=25.0,
        _env_file=None,
    )


@pytest.fixture
def member(store):
    """체크인 대상 회원"""
    return make_member_row(store, "user-ada", "Ada", "Lovelace")


@pytest.fixture
def event(store):
    """일반 이벤트"""
    return make_event_row(store, "Fall GBM")


@pytest.fixture
def discord():
    """Discord 클라이언트 대역"""
    client = MagicMock()
    client.create_scheduled_event = AsyncMock(return_value="discord-event-123")
    client.log = AsyncMock(return_value=None)
    return client


@pytest.fixture
def qr_storage():
    """QR 스토리지 대역"""
    storage = MagicMock()
    storage.provision.return_value = True
    return storage


@pytest.fixture
def today():
    return date(2024, 6, 14)
