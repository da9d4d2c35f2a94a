"""
animal_rescue.api.errors

Translation of service rejections into HTTP errors.
"""

from __future__ import annotations

from fastapi import HTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_403_FORBIDDEN

from animal_rescue.services.adoption_service import Rejection, RejectionKind

REJECTION_STATUS: dict[RejectionKind, int] = {
    RejectionKind.not_found: HTTP_400_BAD_REQUEST,
    RejectionKind.quota_exceeded: HTTP_400_BAD_REQUEST,
    RejectionKind.forbidden: HTTP_403_FORBIDDEN,
}


def raise_for_rejection(rejection: Rejection | None) -> None:
    if rejection is None:
        return
    raise HTTPException(status_code=REJECTION_STATUS[rejection.kind], detail=rejection.message)
