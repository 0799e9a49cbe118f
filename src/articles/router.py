from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.articles import service
from src.articles.schemas import (
    ArticleCreate,
    ArticlePage,
    ArticleTranslationResponse,
    ArticleUpdate,
    ArticleWithRelations,
    FeaturedUpdate,
    TranslationUpsert,
)
from src.auth.deps import require_admin
from src.auth.models import User
from src.categories.service import get_category, get_subcategory
from src.database import get_db
from src.exceptions import not_found, server_error
from src.languages.service import get_language

router = APIRouter(prefix="/admin/articles", tags=["Articles"], dependencies=[Depends(require_admin)])


async def _check_taxonomy(db: AsyncSession, category_id: int | None, subcategory_id: int | None):
    """The category must exist and the subcategory, if any, must belong to it."""
    if category_id is not None and await get_category(db, category_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Category with id {category_id} does not exist"
        )

    if subcategory_id is not None:
        subcategory = await get_subcategory(db, subcategory_id)
        if subcategory is None or subcategory.category_id != category_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Subcategory {subcategory_id} does not belong to category {category_id}"
            )


@router.get("/", response_model=ArticlePage)
async def list_articles(
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """List articles with category, subcategory and translations, one page at a time."""
    articles, count = await service.fetch_articles(db, page=page)
    return ArticlePage(
        data=[ArticleWithRelations.model_validate(a) for a in articles],
        count=count,
        page=page
    )


@router.post("/", response_model=ArticleWithRelations, status_code=status.HTTP_201_CREATED)
async def create_article(
    article: ArticleCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_admin)
):
    """Create an article authored by the signed-in user."""
    await _check_taxonomy(db, article.category_id, article.subcategory_id)

    created = await service.add_article(db, article.model_dump(), author_id=user.id)
    if created is None:
        raise server_error()
    return created


@router.get("/{article_id}", response_model=ArticleWithRelations)
async def get_article(
    article_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Load an article into the edit form."""
    article = await service.get_article(db, article_id)
    if article is None:
        raise not_found("Article", article_id)
    return article


@router.put("/{article_id}", response_model=ArticleWithRelations)
async def update_article(
    article_id: int,
    article: ArticleUpdate,
    db: AsyncSession = Depends(get_db)
):
    current = await service.get_article(db, article_id)
    if current is None:
        raise not_found("Article", article_id)

    data = article.model_dump(exclude_unset=True)
    if "category_id" in data or "subcategory_id" in data:
        category_id = data.get("category_id", current.category_id)
        # Moving to another category drops a subcategory that was not resent
        subcategory_id = data.get(
            "subcategory_id",
            current.subcategory_id if category_id == current.category_id else None
        )
        data["subcategory_id"] = subcategory_id
        await _check_taxonomy(db, category_id, subcategory_id)

    if not await service.update_article(db, article_id, data):
        raise server_error()
    return await service.get_article(db, article_id)


@router.patch("/{article_id}/featured", response_model=ArticleWithRelations)
async def update_featured(
    article_id: int,
    payload: FeaturedUpdate | None = None,
    db: AsyncSession = Depends(get_db)
):
    """Set is_featured, or flip it when no value is sent."""
    if await service.get_article(db, article_id) is None:
        raise not_found("Article", article_id)

    if payload is None or payload.is_featured is None:
        article = await service.toggle_featured(db, article_id)
    else:
        article = await service.set_featured(db, article_id, payload.is_featured)

    if article is None:
        raise server_error()
    return article


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    db: AsyncSession = Depends(get_db)
):
    if await service.get_article(db, article_id) is None:
        raise not_found("Article", article_id)

    if not await service.delete_article(db, article_id):
        raise server_error()


# ========== Translate page ==========


@router.get("/{article_id}/translations/{language_id}", response_model=ArticleTranslationResponse)
async def get_article_translation(
    article_id: int,
    language_id: int,
    db: AsyncSession = Depends(get_db)
):
    translation = await service.get_article_translation(db, article_id, language_id)
    if translation is None:
        raise not_found("Translation", f"{article_id}/{language_id}")
    return translation


@router.put("/{article_id}/translations/{language_id}", response_model=ArticleTranslationResponse)
async def save_article_translation(
    article_id: int,
    language_id: int,
    translation: TranslationUpsert,
    db: AsyncSession = Depends(get_db)
):
    """Create or overwrite the translation of an article in one language."""
    if await service.get_article(db, article_id) is None:
        raise not_found("Article", article_id)

    language = await get_language(db, language_id)
    if language is None or not language.is_active:
        raise not_found("Language", language_id)

    saved = await service.upsert_article_translation(
        db, article_id, language_id, translation.title, translation.description
    )
    if saved is None:
        raise server_error()
    return saved
