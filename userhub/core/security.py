from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import secrets

from userhub.core.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


async def require_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    """
    Require an Authorization: Bearer header.
    When API_TOKEN is configured the token must match it.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = credentials.credentials
    # compare_digest only accepts ASCII str, header values may be latin-1
    if settings.API_TOKEN and not secrets.compare_digest(
        token.encode("utf-8"), settings.API_TOKEN.encode("utf-8")
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return token
