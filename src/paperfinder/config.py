"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from paperfinder.auth import AuthInfo
from paperfinder.errors import ConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True, frozen=True)
class Settings:
    """
    Settings for a `PaperFinder`.

    Attributes:
        root_folder_id: Drive id of the archive root (Year folders live here).
        auth_info: credentials used to build the Drive service.
        request_timeout: per-request HTTP timeout in seconds.
        min_year / max_year: range of year folders offered to the picker.
        supports_all_drives: include shared-drive items in every request.
        log_level: level name used by the CLI's logging setup.
    """

    root_folder_id: str
    auth_info: Optional[AuthInfo] = None
    request_timeout: float = 30.0
    min_year: int = 2010
    max_year: Optional[int] = None
    supports_all_drives: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not isinstance(self.root_folder_id, str) or not self.root_folder_id.strip():
            raise ConfigError("root_folder_id must be a non-empty string")
        if self.request_timeout <= 0:
            raise ConfigError(
                "request_timeout must be positive",
                details={"request_timeout": self.request_timeout},
            )
        if self.max_year is not None and self.max_year < self.min_year:
            raise ConfigError(
                "max_year must not be lower than min_year",
                details={"min_year": self.min_year, "max_year": self.max_year},
            )
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError("unknown log level", details={"log_level": self.log_level})

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        with_credentials: bool = True,
    ) -> Settings:
        """
        Read settings from environment variables.

        Raises:
            ConfigError: missing TARGET_FOLDER_ID or a malformed value.
            MissingCredentialError: `with_credentials` and nothing usable set.
        """
        env = os.environ if environ is None else environ

        root = env.get("TARGET_FOLDER_ID", "").strip()
        if not root:
            raise ConfigError("TARGET_FOLDER_ID is not set")

        max_year_raw = env.get("PAPERFINDER_MAX_YEAR", "").strip()
        return cls(
            root_folder_id=root,
            auth_info=AuthInfo.from_env(env) if with_credentials else None,
            request_timeout=_float(env, "PAPERFINDER_REQUEST_TIMEOUT", 30.0),
            min_year=_int(env, "PAPERFINDER_MIN_YEAR", 2010),
            max_year=_int(env, "PAPERFINDER_MAX_YEAR", 0) if max_year_raw else None,
            supports_all_drives=_bool(env, "PAPERFINDER_SUPPORTS_ALL_DRIVES", True),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer", details={key: raw}, cause=exc) from exc


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be a number", details={key: raw}, cause=exc) from exc


def _bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean", details={key: raw})
