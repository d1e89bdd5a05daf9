from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from marriage_scores.storage.repository import StorageError


def api_error(
    *,
    code: str,
    message: str,
    details: Any | None = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "code": code,
            "message": message,
            "details": details,
        },
    )


def storage_error(exc: StorageError, details: Any | None = None) -> HTTPException:
    return api_error(
        code="storage_unavailable",
        message=str(exc),
        details=details,
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
