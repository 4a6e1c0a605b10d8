# backend/security.py
from typing import Awaitable, Callable, Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

Authorizer = Callable[..., Awaitable[None]]

api_key_header = APIKeyHeader(name="X-API-KEY", auto_error=False)


async def allow_all() -> None:
    return None


def api_key_authorizer(expected: str) -> Authorizer:
    """Dependency that rejects requests whose X-API-KEY header doesn't match."""

    async def validate_api_key(api_key: Optional[str] = Security(api_key_header)) -> None:
        if not api_key or api_key != expected:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials"
            )

    return validate_api_key
