from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.deps import require_admin
from src.database import get_db
from src.exceptions import not_found, server_error
from src.languages import service
from src.languages.schemas import LanguageCreate, LanguageResponse

router = APIRouter(prefix="/admin/languages", tags=["Languages"], dependencies=[Depends(require_admin)])


@router.get("/", response_model=List[LanguageResponse])
async def list_languages(
    active_only: bool = False,
    db: AsyncSession = Depends(get_db)
):
    """List all languages, newest first."""
    return await service.list_languages(db, active_only=active_only)


@router.post("/", response_model=LanguageResponse, status_code=status.HTTP_201_CREATED)
async def create_language(
    language: LanguageCreate,
    db: AsyncSession = Depends(get_db)
):
    """Add a language; a new default replaces the previous one."""
    if await service.get_language_by_code(db, language.code) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Language '{language.code}' already exists"
        )

    created = await service.add_language(db, language)
    if created is None:
        raise server_error()
    return created


@router.patch("/{language_id}/toggle", response_model=LanguageResponse)
async def toggle_language(
    language_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Activate or deactivate a language."""
    if await service.get_language(db, language_id) is None:
        raise not_found("Language", language_id)

    language = await service.toggle_language_status(db, language_id)
    if language is None:
        raise server_error()
    return language
