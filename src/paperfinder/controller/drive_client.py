"""Google Drive API client (read-only)."""

from __future__ import annotations

import io
import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Sequence, TypeVar

from paperfinder.auth import DEFAULT_SCOPES, AuthInfo, CredentialProvider
from paperfinder.errors import (
    ApiError,
    HttpErrorInfo,
    MissingCredentialError,
    NetworkError,
    RateLimitError,
    RemoteTransportError,
    map_http_error,
)
from paperfinder.models import RemoteFile
from paperfinder.query import Expr, ParentIn, all_of, not_trashed, render_query
from paperfinder.util.time import parse_rfc3339

from .fields import FILE_FIELDS, LIST_FIELDS, ORDER_BY, PAGE_SIZE

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 3
    initial_delay_sec: float = 1.0


class DriveClient:
    """
    Read-only Drive client.

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Public methods never raise transport errors: they are logged and
          turned into an empty result. MissingCredentialError propagates.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        timeout: float = 30.0,
        supports_all_drives: bool = True,
    ) -> None:
        self._supports_all_drives = supports_all_drives
        self._retry_policy = _RetryPolicy()

        use_scopes = list(scopes) if scopes is not None else list(DEFAULT_SCOPES)
        provider = CredentialProvider(auth_info)
        self._service = provider.build_drive_service(use_scopes, timeout=timeout)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> "DriveClient":
        """Create client from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._retry_policy = _RetryPolicy()
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def find(
        self,
        expr: Expr,
        *,
        parent_id: Optional[str] = None,
        include_trashed: bool = False,
    ) -> list[RemoteFile]:
        """
        List every item matching `expr`, following pagination to the end.

        Returns:
            All matches in remote order, or [] if the remote failed.
        """
        terms = [expr]
        if parent_id is not None:
            terms.insert(0, ParentIn(parent_id))
        if not include_trashed:
            terms.append(not_trashed())
        q = render_query(all_of(*terms))

        try:
            files = self._find_by_query(q)
        except RemoteTransportError as exc:
            logger.warning(
                "Drive listing failed (q=%r, parent=%s): %s %s",
                q, parent_id, type(exc).__name__, exc.details,
            )
            return []

        logger.debug("Drive listing returned %d item(s) for q=%r", len(files), q)
        return files

    def get_file(self, file_id: str) -> Optional[RemoteFile]:
        req = self._service.files().get(
            fileId=file_id,
            fields=FILE_FIELDS,
            **self._common_get_kwargs(),
        )
        try:
            data = self._execute(req.execute)
        except RemoteTransportError as exc:
            logger.warning(
                "Drive metadata fetch failed (file=%s): %s %s",
                file_id, type(exc).__name__, exc.details,
            )
            return None
        return _file_dict_to_remote_file(data)

    def get_content(self, file_id: str) -> Optional[bytes]:
        """Download a file's bytes into memory."""
        from googleapiclient.http import MediaIoBaseDownload

        req = self._service.files().get_media(
            fileId=file_id,
            **self._common_get_kwargs(),
        )

        buf = io.BytesIO()
        downloader = MediaIoBaseDownload(buf, req)
        done = False
        try:
            while not done:
                _status, done = self._execute(downloader.next_chunk)
        except RemoteTransportError as exc:
            logger.warning(
                "Drive download failed (file=%s): %s %s",
                file_id, type(exc).__name__, exc.details,
            )
            return None
        return buf.getvalue()

    def close(self) -> None:
        """Release the underlying HTTP transport, if the service has one."""
        close = getattr(self._service, "close", None)
        if callable(close):
            close()

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _find_by_query(self, q: str) -> list[RemoteFile]:
        all_files: list[RemoteFile] = []
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageSize=PAGE_SIZE,
                orderBy=ORDER_BY,
                pageToken=page_token,
                **self._common_list_kwargs(),
            )
            data = self._execute(req.execute)
            files = data.get("files", [])
            for f in files:
                all_files.append(_file_dict_to_remote_file(f))

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return all_files

    def _execute(self, func: Callable[[], T]) -> T:
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            try:
                return func()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if self._should_retry(mapped) and attempt < self._retry_policy.max_retries:
                    logger.debug("Retrying Drive call in %.1fs after %s", delay, type(mapped).__name__)
                    time.sleep(delay)
                    delay *= 2
                    continue
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination")

    def _should_retry(self, exc: Exception) -> bool:
        if isinstance(exc, RateLimitError):
            return True
        if isinstance(exc, NetworkError):
            return True
        if isinstance(exc, ApiError):
            status_code = getattr(exc, "details", {}).get("status_code")
            return isinstance(status_code, int) and 500 <= status_code <= 599
        return False

    def _map_exception(self, exc: Exception) -> Exception:
        from google.auth.exceptions import RefreshError
        from googleapiclient.errors import HttpError

        if isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, RefreshError):
            return MissingCredentialError("Token refresh failed", cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _file_dict_to_remote_file(data: dict[str, Any]) -> RemoteFile:
    parents = data.get("parents") or []
    link = data.get("webViewLink")

    return RemoteFile(
        file_id=_str(data.get("id")),
        name=_str(data.get("name")),
        mime_type=_str(data.get("mimeType")),
        parents=tuple(parents) if isinstance(parents, list) else (),
        size=_size(data.get("size")),
        created_time=_timestamp(data.get("createdTime")),
        modified_time=_timestamp(data.get("modifiedTime")),
        view_link=link if isinstance(link, str) and link else None,
        trashed=bool(data.get("trashed", False)),
    )


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _size(value: Any) -> Optional[int]:
    # Drive sends int64 fields as strings; folders have no size.
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def _timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        return None


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        try:
            status_code = int(status_code)
        except (TypeError, ValueError):
            status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
