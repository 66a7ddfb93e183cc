"""Credential and Drive service construction for paperfinder."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from paperfinder.errors import MissingCredentialError

from .auth_info import OAUTH, SERVICE_ACCOUNT, AuthInfo

logger = logging.getLogger(__name__)

DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.readonly",)


class CredentialProvider:
    """Obtain and refresh credentials, and build Drive API service objects."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    def get_credentials(self, scopes: Sequence[str] = DEFAULT_SCOPES):
        """
        Return valid google-auth credentials for the given scopes.

        Raises:
            MissingCredentialError: on load/refresh/flow failures.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise MissingCredentialError("scopes must be a non-empty sequence of strings")

        if self._auth_info.kind == SERVICE_ACCOUNT:
            return self._service_account_credentials(scopes)
        if self._auth_info.kind == OAUTH:
            return self._oauth_credentials(scopes)
        raise MissingCredentialError(
            "Unsupported credential kind",
            details={"kind": self._auth_info.kind},
        )

    def build_drive_service(
        self,
        scopes: Sequence[str] = DEFAULT_SCOPES,
        *,
        timeout: float = 30.0,
    ):
        """
        Build a Drive v3 resource whose HTTP calls time out after `timeout`
        seconds.

        Returns:
            googleapiclient.discovery.Resource
        """
        import httplib2
        from google_auth_httplib2 import AuthorizedHttp
        from googleapiclient.discovery import build

        creds = self.get_credentials(scopes)
        http = AuthorizedHttp(creds, http=httplib2.Http(timeout=timeout))
        try:
            return build("drive", "v3", http=http, cache_discovery=False)
        except Exception as exc:
            raise MissingCredentialError("Failed to build Drive service", cause=exc) from exc

    # ----------------------------
    # Internals
    # ----------------------------
    def _service_account_credentials(self, scopes: Sequence[str]):
        from google.auth.transport.requests import Request
        from google.oauth2 import service_account

        key_file = self._auth_info.service_account_file
        try:
            if key_file:
                creds = service_account.Credentials.from_service_account_file(
                    key_file,
                    scopes=list(scopes),
                )
            else:
                creds = service_account.Credentials.from_service_account_info(
                    self._auth_info.service_account_info or {},
                    scopes=list(scopes),
                )
        except Exception as exc:
            raise MissingCredentialError(
                "Failed to load service account key",
                details={"service_account_file": key_file},
                cause=exc,
            ) from exc

        try:
            creds.refresh(Request())
        except Exception as exc:
            raise MissingCredentialError(
                "Failed to obtain service account token",
                details={"client_email": getattr(creds, "service_account_email", None)},
                cause=exc,
            ) from exc

        logger.info("Service account token obtained for %s", creds.service_account_email)
        return creds

    def _oauth_credentials(self, scopes: Sequence[str]):
        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials

        token_file = self._auth_info.token_file
        creds = None

        if os.path.exists(token_file):
            try:
                creds = Credentials.from_authorized_user_file(token_file, scopes=list(scopes))
            except Exception as exc:
                raise MissingCredentialError(
                    "Failed to load token_file",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

            if not creds.valid and creds.refresh_token:
                try:
                    creds.refresh(Request())
                    self._save_credentials(creds)
                except Exception as exc:
                    raise MissingCredentialError(
                        "Failed to refresh OAuth credentials",
                        details={"token_file": token_file},
                        cause=exc,
                    ) from exc

            if creds.valid:
                return creds

        client_secrets = self._auth_info.client_secrets_file
        if not client_secrets:
            raise MissingCredentialError(
                "OAuth token is missing or invalid and no client secrets are configured",
                details={"token_file": token_file},
            )

        # No usable token -> run the installed-app flow.
        from google_auth_oauthlib.flow import InstalledAppFlow

        try:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets, scopes=list(scopes))
            creds = flow.run_local_server(port=0)
            self._save_credentials(creds)
            return creds
        except Exception as exc:
            raise MissingCredentialError(
                "OAuth authorization flow failed",
                details={"client_secrets_file": client_secrets, "token_file": token_file},
                cause=exc,
            ) from exc

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        token_dir = os.path.dirname(token_file)
        if token_dir:
            os.makedirs(token_dir, exist_ok=True)

        try:
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise MissingCredentialError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc
