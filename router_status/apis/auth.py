"""
Auth router: exposes the /auth/token endpoint engines log in through.

An engine exchanges its registered client name and password for a bearer
token using the OAuth2 "password" grant (RFC 6749 §4.3):
  Content-Type: application/x-www-form-urlencoded
  username=<client name>&password=<client password>

The response carries the token lifetime in seconds so the engine knows when
to log in again instead of failing a read mid-plan.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel

from router_status.config import settings
from router_status.services import auth

router = APIRouter(prefix="/auth", tags=["Authentication"])


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


@router.post(
    "/token",
    response_model=TokenResponse,
    summary="Obtain a JWT access token",
    description=(
        "Submit engine client credentials to receive a Bearer token for the "
        "data source endpoints."
    ),
)
def login(form_data: OAuth2PasswordRequestForm = Depends()) -> TokenResponse:
    """Validate client credentials and issue a JWT."""
    if not auth.authenticate_client(form_data.username, form_data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect client name or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = auth.create_access_token(subject=form_data.username)
    return TokenResponse(
        access_token=token,
        expires_in=settings.jwt_expire_minutes * 60,
    )
