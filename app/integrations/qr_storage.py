"""
QR Code Storage - 회원 체크인용 QR 코드 생성 및 업로드
"""
import io
from typing import Optional

import qrcode
from loguru import logger
from supabase import Client

from app.config import ClubSettings, get_settings
from app.club.constants import QR_OBJECT_NAME, QR_PAYLOAD


def generate_qr_png(data: str) -> bytes:
    """QR 코드 PNG 바이너리 생성"""
    img = qrcode.make(data)
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()


class QRCodeStorage:
    """Supabase Storage 버킷에 회원 QR 코드 저장"""

    def __init__(self, client: Client, settings: Optional[ClubSettings] = None):
        self.client = client
        self.settings = settings or get_settings()
        self.bucket_name = self.settings.qr_bucket_name

    def _ensure_bucket(self) -> None:
        buckets = self.client.storage.list_buckets()
        if any(bucket.name == self.bucket_name for bucket in buckets):
            return

        logger.info(f"QR 버킷 생성: {self.bucket_name}")
        self.client.storage.create_bucket(
            self.bucket_name,
            options={"public": False}
        )

    def provision(self, user_id: str) -> bool:
        """
        QR 코드 생성 후 업로드 (best-effort)

        실패는 로그만 남기고 False 반환. 회원 등록을 막지 않는다.
        """
        object_name = QR_OBJECT_NAME.format(user_id=user_id)

        try:
            self._ensure_bucket()
            qr_png = generate_qr_png(QR_PAYLOAD.format(user_id=user_id))
            self.client.storage.from_(self.bucket_name).upload(
                object_name,
                qr_png,
                {"content-type": "image/png"}
            )
        except Exception as e:
            logger.error(f"QR 코드 생성 오류 ({user_id}): {e}")
            return False

        logger.info(f"QR 코드 업로드 완료: {object_name}")
        return True


def get_qr_storage() -> QRCodeStorage:
    from database.supabase_client import get_supabase_client
    return QRCodeStorage(get_supabase_client())
