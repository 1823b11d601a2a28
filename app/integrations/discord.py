"""
Discord Module - 길드 이벤트 게시 및 로그 채널 알림
"""
from functools import lru_cache
from typing import Optional

import httpx
from loguru import logger

from app.config import ClubSettings, get_settings
from app.club.constants import (
    DISCORD_ENTITY_EXTERNAL,
    DISCORD_PRIVACY_GUILD_ONLY,
    LOG_COLORS,
)


class DiscordClient:
    """Discord REST API 클라이언트 (봇 토큰 인증)"""

    def __init__(
        self,
        settings: Optional[ClubSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.discord_api_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.settings.discord_timeout,
            headers={"Authorization": f"Bot {self.settings.discord_bot_token}"},
            transport=self._transport,
        )

    async def create_scheduled_event(
        self,
        description: str,
        name: str,
        start_iso: str,
        end_iso: str,
        location: str
    ) -> Optional[str]:
        """
        길드 예약 이벤트 생성

        Args:
            description: 이벤트 설명
            name: 이벤트 이름
            start_iso: 시작 시각 (ISO-8601)
            end_iso: 종료 시각 (ISO-8601)
            location: 장소 (외부 이벤트 메타데이터)

        Returns:
            생성된 Discord 이벤트 ID (응답에 없으면 None)

        Raises:
            httpx.HTTPError: 요청 실패 또는 2xx 이외 응답
        """
        payload = {
            "description": description,
            "name": name,
            "privacy_level": DISCORD_PRIVACY_GUILD_ONLY,
            "scheduled_start_time": start_iso,
            "scheduled_end_time": end_iso,
            "entity_type": DISCORD_ENTITY_EXTERNAL,
            "entity_metadata": {"location": location},
        }

        async with self._client() as client:
            response = await client.post(
                f"/guilds/{self.settings.discord_guild_id}/scheduled-events",
                json=payload
            )
            if response.status_code >= 400:
                logger.error(f"Discord 이벤트 생성 실패: {response.status_code} - {response.text}")
            response.raise_for_status()
            data = response.json()

        logger.debug(f"Discord 이벤트 응답: {data}")
        return data.get("id")

    async def log(
        self,
        title: str,
        message: str,
        color: str = "tk_blue",
        user_id: Optional[str] = None
    ) -> None:
        """
        로그 채널에 임베드 전송 (실패해도 예외를 올리지 않음)
        """
        embed = {
            "title": title,
            "description": message,
            "color": LOG_COLORS.get(color, LOG_COLORS["tk_blue"]),
        }
        if user_id:
            embed["footer"] = {"text": f"Action by user {user_id}"}

        try:
            async with self._client() as client:
                response = await client.post(
                    f"/channels/{self.settings.discord_log_channel_id}/messages",
                    json={"embeds": [embed]}
                )
                response.raise_for_status()
        except Exception as e:
            logger.error(f"Discord 로그 전송 실패 ({title}): {e}")


@lru_cache()
def get_discord_client() -> DiscordClient:
    return DiscordClient()
