"""
External Integrations - 외부 서비스 연동
- Discord (이벤트 게시, 알림 로그)
- QR 코드 스토리지 (Supabase Storage)
"""
from .discord import DiscordClient, get_discord_client
from .qr_storage import QRCodeStorage, get_qr_storage

__all__ = [
    "DiscordClient",
    "get_discord_client",
    "QRCodeStorage",
    "get_qr_storage",
]
