"""
FastAPI dependency that resolves the calling engine client from its token.

The returned client name is what the data source routes log against each
schema or read request; a missing, expired or foreign-signed token stops the
request with 401 before any provider context or Compute client is touched.

Usage in a route:
    @router.post("/read")
    def read(current_client: str = Depends(get_current_client)):
        ...
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from router_status.services.auth import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")


def get_current_client(token: str = Depends(oauth2_scheme)) -> str:
    """Return the name of the engine client the bearer token was issued to."""
    client = decode_access_token(token)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return client
