"""
Discord Client Tests - httpx MockTransport로 요청 검증
"""
import json

import httpx
import pytest

from app.club.constants import LOG_COLORS
from app.integrations.discord import DiscordClient


def recording_transport(requests: list, status_code: int = 200, body: dict = None):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json=body if body is not None else {})
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
class TestScheduledEvent:
    """길드 예약 이벤트 생성"""

    async def test_payload(self, settings):
        """요청 경로, 인증 헤더, 페이로드"""
        requests = []
        client = DiscordClient(settings, transport=recording_transport(requests, body={"id": "99887766"}))

        event_id = await client.create_scheduled_event(
            description="Learn version control",
            name="Intro to Git",
            start_iso="2024-09-12T18:30:00+00:00",
            end_iso="2024-09-12T21:30:00+00:00",
            location="ENG2 102"
        )

        assert event_id == "99887766"
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path.endswith(f"/guilds/{settings.discord_guild_id}/scheduled-events")
        assert request.headers["Authorization"] == f"Bot {settings.discord_bot_token}"

        payload = json.loads(request.content)
        assert payload == {
            "description": "Learn version control",
            "name": "Intro to Git",
            "privacy_level": 2,
            "scheduled_start_time": "2024-09-12T18:30:00+00:00",
            "scheduled_end_time": "2024-09-12T21:30:00+00:00",
            "entity_type": 3,
            "entity_metadata": {"location": "ENG2 102"},
        }

    async def test_missing_id(self, settings):
        """응답에 id 없으면 None"""
        client = DiscordClient(settings, transport=recording_transport([], body={"name": "x"}))

        event_id = await client.create_scheduled_event("d", "n", "s", "e", "l")

        assert event_id is None

    async def test_error_status_raises(self, settings):
        client = DiscordClient(settings, transport=recording_transport([], status_code=500))

        with pytest.raises(httpx.HTTPStatusError):
            await client.create_scheduled_event("d", "n", "s", "e", "l")


@pytest.mark.asyncio
class TestLogChannel:
    """로그 채널 알림"""

    async def test_embed(self, settings):
        requests = []
        client = DiscordClient(settings, transport=recording_transport(requests))

        await client.log(
            title="Feedback Given",
            message="Ada Lovelace gave feedback for Fall GBM!",
            color="tk_blue",
            user_id="discord-user-1"
        )

        request = requests[0]
        assert request.url.path.endswith(f"/channels/{settings.discord_log_channel_id}/messages")

        embed = json.loads(request.content)["embeds"][0]
        assert embed["title"] == "Feedback Given"
        assert embed["description"] == "Ada Lovelace gave feedback for Fall GBM!"
        assert embed["color"] == LOG_COLORS["tk_blue"]
        assert embed["footer"] == {"text": "Action by user discord-user-1"}

    async def test_no_footer_without_user(self, settings):
        requests = []
        client = DiscordClient(settings, transport=recording_transport(requests))

        await client.log(title="t", message="m")

        embed = json.loads(requests[0].content)["embeds"][0]
        assert "footer" not in embed

    async def test_failure_swallowed(self, settings):
        """전송 실패해도 예외 없음"""
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        client = DiscordClient(settings, transport=httpx.MockTransport(handler))

        await client.log(title="t", message="m")
