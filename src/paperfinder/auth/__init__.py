"""Public auth exports for paperfinder."""

from __future__ import annotations

from .auth_info import OAUTH, SERVICE_ACCOUNT, AuthInfo
from .credentials import DEFAULT_SCOPES, CredentialProvider

__all__ = ["AuthInfo", "CredentialProvider", "DEFAULT_SCOPES", "OAUTH", "SERVICE_ACCOUNT"]
