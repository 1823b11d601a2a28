"""
QR Code Storage Tests
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

from app.integrations.qr_storage import QRCodeStorage, generate_qr_png


def storage_client(bucket_names):
    client = MagicMock()
    client.storage.list_buckets.return_value = [SimpleNamespace(name=n) for n in bucket_names]
    return client


class TestGenerateQR:

    def test_png_bytes(self):
        png = generate_qr_png("user:user-ada")
        assert png.startswith(b"\x89PNG")


class TestProvision:
    """QR 코드 발급"""

    def test_creates_missing_bucket(self, settings):
        """버킷 없으면 비공개로 생성 후 업로드"""
        client = storage_client([])
        storage = QRCodeStorage(client, settings)

        assert storage.provision("user-ada") is True

        client.storage.create_bucket.assert_called_once_with(
            settings.qr_bucket_name, options={"public": False}
        )
        client.storage.from_.assert_called_with(settings.qr_bucket_name)

        name, data, options = client.storage.from_.return_value.upload.call_args.args
        assert name == "qr-code-user-ada.png"
        assert data.startswith(b"\x89PNG")
        assert options == {"content-type": "image/png"}

    def test_payload_encodes_user(self, settings, monkeypatch):
        """QR 내용은 user:<user_id>"""
        payloads = []

        def fake_generate(data):
            payloads.append(data)
            return b"\x89PNG-fake"

        monkeypatch.setattr("app.integrations.qr_storage.generate_qr_png", fake_generate)
        client = storage_client([settings.qr_bucket_name])
        storage = QRCodeStorage(client, settings)

        assert storage.provision("user-ada") is True

        assert payloads == ["user:user-ada"]
        name, data, _ = client.storage.from_.return_value.upload.call_args.args
        assert name == "qr-code-user-ada.png"
        assert data == b"\x89PNG-fake"

    def test_existing_bucket_reused(self, settings):
        client = storage_client([settings.qr_bucket_name])
        storage = QRCodeStorage(client, settings)

        assert storage.provision("user-ada") is True
        client.storage.create_bucket.assert_not_called()

    def test_upload_failure_returns_false(self, settings):
        """업로드 실패는 False (예외 전파 없음)"""
        client = storage_client([settings.qr_bucket_name])
        client.storage.from_.return_value.upload.side_effect = RuntimeError("quota exceeded")
        storage = QRCodeStorage(client, settings)

        assert storage.provision("user-ada") is False
