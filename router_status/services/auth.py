"""
Authentication for engine clients: credential check + JWT issue/verify.

The callers of this service are infrastructure-as-code engines (a Terraform
provider shim, a CI plan job), not people.  Each engine is registered in
`settings.engine_clients` under a client name; there are no roles, and any
registered engine may read any router the service's Google credentials can
see.  The JWT only says *which* engine asked, so reads can be attributed in
the logs.

Flow
────
1. Before a plan or refresh, the engine calls POST /auth/token with its
   client name + password.
2. The pair is checked against `settings.engine_clients` (plain text or
   bcrypt hash).
3. The signed JWT is cached by the engine for `jwt_expire_minutes` and sent
   as  Authorization: Bearer <token>  on every schema and read call.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from router_status.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ── Token helpers ─────────────────────────────────────────────────────────────

def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT whose 'sub' claim is the client name."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_expire_minutes)
    )
    payload = {"sub": subject, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[str]:
    """Return the client name from *token*, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
        return payload.get("sub")
    except JWTError:
        return None


# ── Credential validation ─────────────────────────────────────────────────────

def authenticate_client(client: str, password: str) -> bool:
    """Check *client* / *password* against the configured engine clients."""
    stored_password = settings.get_engine_clients().get(client)
    if not stored_password:
        return False
    if stored_password.startswith("$2b$"):
        return pwd_context.verify(password, stored_password)
    return stored_password == password
