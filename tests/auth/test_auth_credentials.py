import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

from paperfinder.auth import AuthInfo, CredentialProvider
from paperfinder.errors import MissingCredentialError

SCOPES = ["https://www.googleapis.com/auth/drive.readonly"]


class TestCredentialProvider(unittest.TestCase):
    def test_get_credentials_loads_token_file_without_refresh(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            token_file = tmp_path / "token.json"

            token_payload = {
                "token": "fake-token",
                "refresh_token": "fake-refresh-token",
                "token_uri": "https://oauth2.googleapis.com/token",
                "client_id": "fake-client-id",
                "client_secret": "fake-client-secret",
                "scopes": SCOPES,
                "type": "authorized_user",
                "expiry": "2099-01-01T00:00:00Z",
            }
            token_file.write_text(json.dumps(token_payload), encoding="utf-8")

            info = AuthInfo(kind="oauth", data={"token_file": str(token_file)})
            with patch("google.oauth2.credentials.Credentials.refresh") as refresh:
                creds = CredentialProvider(info).get_credentials(SCOPES)

            refresh.assert_not_called()
            self.assertEqual(creds.token, "fake-token")
            self.assertEqual(creds.refresh_token, "fake-refresh-token")

    def test_missing_token_without_client_secrets(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            info = AuthInfo(kind="oauth", data={"token_file": str(Path(tmp) / "missing.json")})
            with self.assertRaises(MissingCredentialError):
                CredentialProvider(info).get_credentials(SCOPES)

    def test_unreadable_service_account_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            key = Path(tmp) / "key.json"
            key.write_text("{not json", encoding="utf-8")
            info = AuthInfo(kind="service_account", data={"service_account_file": str(key)})
            with self.assertRaises(MissingCredentialError) as ctx:
                CredentialProvider(info).get_credentials(SCOPES)
            self.assertEqual(ctx.exception.details["service_account_file"], str(key))

    def test_empty_scopes_rejected(self) -> None:
        info = AuthInfo(kind="oauth", data={"token_file": "/tmp/token.json"})
        with self.assertRaises(MissingCredentialError):
            CredentialProvider(info).get_credentials([])

    def test_build_drive_service_uses_timeout_transport(self) -> None:
        info = AuthInfo(kind="oauth", data={"token_file": "/tmp/token.json"})
        provider = CredentialProvider(info)
        creds = Mock()

        with patch.object(provider, "get_credentials", return_value=creds), \
                patch("httplib2.Http") as http_cls, \
                patch("google_auth_httplib2.AuthorizedHttp") as authorized_cls, \
                patch("googleapiclient.discovery.build") as build:
            service = provider.build_drive_service(SCOPES, timeout=12.5)

        http_cls.assert_called_once_with(timeout=12.5)
        authorized_cls.assert_called_once_with(creds, http=http_cls.return_value)
        build.assert_called_once_with(
            "drive", "v3", http=authorized_cls.return_value, cache_discovery=False
        )
        self.assertIs(service, build.return_value)


if __name__ == "__main__":
    unittest.main()
