"""Data access for languages."""
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.languages.models import Language
from src.languages.schemas import LanguageCreate
from src.logging_config import get_logger

logger = get_logger(__name__)


async def list_languages(db: AsyncSession, active_only: bool = False) -> List[Language]:
    """List languages, newest first."""
    query = select(Language).order_by(Language.created_at.desc(), Language.id.desc())
    if active_only:
        query = query.where(Language.is_active.is_(True))

    try:
        result = await db.execute(query)
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error fetching languages: {e}")
        await db.rollback()
        return []


async def get_language(db: AsyncSession, language_id: int) -> Optional[Language]:
    try:
        return await db.get(Language, language_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching language {language_id}: {e}")
        await db.rollback()
        return None


async def get_language_by_code(db: AsyncSession, code: str) -> Optional[Language]:
    try:
        result = await db.execute(select(Language).where(Language.code == code))
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching language '{code}': {e}")
        await db.rollback()
        return None


async def get_default_language(db: AsyncSession) -> Optional[Language]:
    try:
        result = await db.execute(
            select(Language).where(Language.is_default.is_(True)).limit(1)
        )
        return result.scalars().first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching default language: {e}")
        await db.rollback()
        return None


async def add_language(db: AsyncSession, data: LanguageCreate) -> Optional[Language]:
    """
    Insert a language.

    Only one language can be the default: adding a new default clears the
    flag on every other row in the same commit.
    """
    try:
        if data.is_default:
            await db.execute(
                update(Language).where(Language.is_default.is_(True)).values(is_default=False)
            )

        language = Language(
            code=data.code,
            name=data.name,
            is_default=data.is_default,
            is_active=data.is_active,
        )
        db.add(language)
        await db.commit()
        await db.refresh(language)
        logger.info(f"🌐 Language added: {language.code}")
        return language
    except SQLAlchemyError as e:
        logger.error(f"Error adding language: {e}")
        await db.rollback()
        return None


async def toggle_language_status(db: AsyncSession, language_id: int) -> Optional[Language]:
    """Flip is_active on a language."""
    try:
        language = await db.get(Language, language_id)
        if language is None:
            return None

        language.is_active = not language.is_active
        await db.commit()
        await db.refresh(language)
        return language
    except SQLAlchemyError as e:
        logger.error(f"Error updating language {language_id}: {e}")
        await db.rollback()
        return None
