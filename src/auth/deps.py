"""FastAPI dependencies for sessions and the admin gate."""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.models import STAFF_ROLES, User
from src.auth.service import get_user
from src.auth.sessions import SessionManager
from src.config import get_settings
from src.constants import ERROR_MESSAGES
from src.database import get_db
from src.redis.client import get_redis

bearer_scheme = HTTPBearer(auto_error=False)


def get_session_manager(client=Depends(get_redis)) -> SessionManager:
    return SessionManager(client, ttl=get_settings().session_ttl_seconds)


def get_token(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> str:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ERROR_MESSAGES["UNAUTHORIZED"],
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_token),
    sessions: SessionManager = Depends(get_session_manager),
    db: AsyncSession = Depends(get_db),
) -> User:
    user = await get_user(db, sessions, token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ERROR_MESSAGES["UNAUTHORIZED"],
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Gate for the admin pages: admins and authors only."""
    if user.role not in STAFF_ROLES:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ERROR_MESSAGES["UNAUTHORIZED"],
        )
    return user
