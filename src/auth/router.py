from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.deps import get_current_user, get_session_manager, get_token
from src.auth.models import User
from src.auth.schemas import SessionResponse, UserLogin, UserResponse
from src.auth.service import sign_in, sign_out
from src.auth.sessions import SessionManager
from src.constants import ERROR_MESSAGES
from src.database import get_db

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=SessionResponse)
async def login(
    credentials: UserLogin,
    sessions: SessionManager = Depends(get_session_manager),
    db: AsyncSession = Depends(get_db)
):
    """Open an admin session."""
    result = await sign_in(db, sessions, credentials.email, credentials.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ERROR_MESSAGES["INVALID_CREDENTIALS"]
        )

    token, user = result
    return SessionResponse(access_token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)):
    """Return the user behind the current session."""
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str = Depends(get_token),
    sessions: SessionManager = Depends(get_session_manager)
):
    """Close the current session."""
    await sign_out(sessions, token)
