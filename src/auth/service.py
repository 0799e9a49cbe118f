"""Sign-in, session lookup and sign-out."""
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.models import User
from src.auth.sessions import SessionManager
from src.logging_config import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


async def sign_in(
        db: AsyncSession,
        sessions: SessionManager,
        email: str,
        password: str) -> Optional[tuple[str, User]]:
    """Check credentials and open a session. Returns (token, user) or None."""
    try:
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching user '{email}': {e}")
        await db.rollback()
        return None

    if user is None or not verify_password(password, user.hashed_password):
        logger.warning(f"Failed sign-in for '{email}'")
        return None

    token = await sessions.create_session(user.id)
    logger.info(f"🔑 Session opened for user {user.id}")
    return token, user


async def get_user(db: AsyncSession, sessions: SessionManager, token: str) -> Optional[User]:
    """Resolve the user behind a session token."""
    session = await sessions.get_session(token)
    if session is None:
        return None

    try:
        return await db.get(User, session["user_id"])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching session user: {e}")
        await db.rollback()
        return None


async def sign_out(sessions: SessionManager, token: str) -> bool:
    removed = await sessions.delete_session(token)
    if removed:
        logger.info("🔒 Session closed")
    return removed
