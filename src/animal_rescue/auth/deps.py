"""
animal_rescue.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Offer an optional variant for endpoints that also serve anonymous callers.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from animal_rescue.api.deps import settings_dep
from animal_rescue.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from animal_rescue.auth.models import Principal
from animal_rescue.observability.logging import LogEvent, get_logger
from animal_rescue.settings import Settings

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def _principal_from_token(token: str, settings: Settings) -> Principal:
    payload = decode_and_validate(cfg=JwtConfig.from_settings(settings), token=token)
    subject = str(payload.get("sub", ""))
    if not subject:
        raise JwtValidationError("empty subject")
    return Principal(name=subject)


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> Principal:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    try:
        return _principal_from_token(creds.credentials, settings)
    except JwtValidationError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}") from e


def get_optional_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(settings_dep),
) -> Principal | None:
    if creds is None or not creds.credentials:
        return None

    try:
        return _principal_from_token(creds.credentials, settings)
    except JwtValidationError as e:
        # Anonymous endpoints answer as if no token had been sent.
        log.warning(LogEvent.invalid_token_ignored, error=str(e))
        return None
