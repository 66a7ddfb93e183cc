"""Authentication information for paperfinder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from paperfinder.errors import MissingCredentialError

SERVICE_ACCOUNT = "service_account"
OAUTH = "oauth"

# Service-account fields as individual environment variables.
_SERVICE_ACCOUNT_ENV: dict[str, str] = {
    "type": "GOOGLE_TYPE",
    "project_id": "GOOGLE_PROJECT_ID",
    "private_key_id": "GOOGLE_PRIVATE_KEY_ID",
    "private_key": "GOOGLE_PRIVATE_KEY",
    "client_email": "GOOGLE_CLIENT_EMAIL",
    "client_id": "GOOGLE_CLIENT_ID",
    "auth_uri": "GOOGLE_AUTH_URI",
    "token_uri": "GOOGLE_TOKEN_URI",
    "auth_provider_x509_cert_url": "GOOGLE_AUTH_PROVIDER_X509_CERT_URL",
    "client_x509_cert_url": "GOOGLE_CLIENT_X509_CERT_URL",
    "universe_domain": "GOOGLE_UNIVERSE_DOMAIN",
}
_REQUIRED_SERVICE_ACCOUNT_FIELDS: tuple[str, ...] = (
    "type",
    "project_id",
    "private_key",
    "client_email",
    "token_uri",
)


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    kind = "service_account", data must include one of:
        - service_account_file: path to the JSON key
        - info: the key's fields as a dict
    kind = "oauth", data must include:
        - token_file
      and may include:
        - client_secrets_file (enables the installed-app flow)
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        if self.kind == SERVICE_ACCOUNT:
            key_file = self.data.get("service_account_file")
            info = self.data.get("info")
            if isinstance(key_file, str) and key_file.strip():
                return
            if isinstance(info, dict):
                missing = [k for k in _REQUIRED_SERVICE_ACCOUNT_FIELDS if not info.get(k)]
                if missing:
                    raise ValueError(f"AuthInfo.data['info'] is missing: {', '.join(missing)}")
                return
            raise ValueError(
                "AuthInfo.data must include 'service_account_file' or 'info'"
            )

        if self.kind == OAUTH:
            value = self.data.get("token_file")
            if not isinstance(value, str) or not value.strip():
                raise ValueError("AuthInfo.data['token_file'] must be a non-empty string")
            return

        raise ValueError(f"AuthInfo.kind must be '{SERVICE_ACCOUNT}' or '{OAUTH}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AuthInfo:
        """
        Resolve credentials from the environment.

        Order:
            1. GOOGLE_SERVICE_ACCOUNT_FILE
            2. GOOGLE_* service-account variables
            3. PAPERFINDER_TOKEN_FILE (+ PAPERFINDER_CLIENT_SECRETS)

        Raises:
            MissingCredentialError: if nothing usable is configured.
        """
        env = os.environ if environ is None else environ

        key_file = env.get("GOOGLE_SERVICE_ACCOUNT_FILE", "").strip()
        if key_file:
            return cls(kind=SERVICE_ACCOUNT, data={"service_account_file": key_file})

        info = {field: env.get(var, "") for field, var in _SERVICE_ACCOUNT_ENV.items()}
        if info["private_key"]:
            info["private_key"] = info["private_key"].replace("\\n", "\n")
        if all(info[k] for k in _REQUIRED_SERVICE_ACCOUNT_FIELDS):
            return cls(
                kind=SERVICE_ACCOUNT,
                data={"info": {k: v for k, v in info.items() if v}},
            )

        token_file = env.get("PAPERFINDER_TOKEN_FILE", "").strip()
        if token_file:
            data = {"token_file": token_file}
            secrets = env.get("PAPERFINDER_CLIENT_SECRETS", "").strip()
            if secrets:
                data["client_secrets_file"] = secrets
            return cls(kind=OAUTH, data=data)

        missing = [var for field, var in _SERVICE_ACCOUNT_ENV.items()
                   if field in _REQUIRED_SERVICE_ACCOUNT_FIELDS and not info[field]]
        raise MissingCredentialError(
            "No credentials configured",
            details={"missing": missing},
        )

    @property
    def service_account_file(self) -> Optional[str]:
        value = self.data.get("service_account_file")
        return str(value) if value else None

    @property
    def service_account_info(self) -> Optional[dict[str, Any]]:
        value = self.data.get("info")
        return dict(value) if isinstance(value, dict) else None

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])

    @property
    def client_secrets_file(self) -> Optional[str]:
        value = self.data.get("client_secrets_file")
        return str(value) if value else None
