"""Data access for articles and article translations."""
from typing import List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.articles.models import Article, ArticleTranslation
from src.constants import FEATURED_ARTICLES_LIMIT, PAGINATION
from src.logging_config import get_logger
from src.slugs import slugify_name

logger = get_logger(__name__)

# Columns an article form may write directly
ARTICLE_FIELDS = (
    "title",
    "description",
    "category_id",
    "subcategory_id",
    "audio_url",
    "youtube_url",
    "external_video_url",
    "is_featured",
)


def _with_relations(query):
    return query.options(
        selectinload(Article.category),
        selectinload(Article.subcategory),
        selectinload(Article.translations),
    ).execution_options(populate_existing=True)


def _translation_value(item, key: str):
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def _translation_rows(article_id: int, translations: Sequence) -> List[ArticleTranslation]:
    return [
        ArticleTranslation(
            article_id=article_id,
            language_id=int(_translation_value(t, "language_id")),
            title=_translation_value(t, "title"),
            description=_translation_value(t, "description") or "",
        )
        for t in translations
    ]


async def fetch_articles(
        db: AsyncSession,
        page: Optional[int] = None) -> Tuple[List[Article], int]:
    """List articles newest first with category, subcategory and translations; optionally one page."""
    query = _with_relations(select(Article)).order_by(Article.created_at.desc(), Article.id.desc())
    if page is not None:
        size = PAGINATION["DEFAULT_PAGE_SIZE"]
        query = query.offset((max(page, 1) - 1) * size).limit(size)

    try:
        result = await db.execute(query)
        articles = list(result.scalars().all())
        count = await db.scalar(select(func.count()).select_from(Article))
        return articles, count or 0
    except SQLAlchemyError as e:
        logger.error(f"Error fetching articles: {e}")
        await db.rollback()
        return [], 0


async def fetch_featured_articles(db: AsyncSession, limit: int = FEATURED_ARTICLES_LIMIT) -> List[Article]:
    try:
        result = await db.execute(
            _with_relations(select(Article))
            .where(Article.is_featured.is_(True))
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error fetching featured articles: {e}")
        await db.rollback()
        return []


async def get_article(db: AsyncSession, article_id: int) -> Optional[Article]:
    try:
        result = await db.execute(
            _with_relations(select(Article))
            .where(Article.id == article_id)
        )
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching article {article_id}: {e}")
        await db.rollback()
        return None


async def get_article_by_slug(db: AsyncSession, slug: str) -> Optional[Article]:
    """Newest article with the slug, translations and their languages embedded."""
    try:
        result = await db.execute(
            _with_relations(select(Article))
            .options(selectinload(Article.translations).selectinload(ArticleTranslation.language))
            .where(Article.slug == slug)
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(1)
        )
        return result.scalars().first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching article '{slug}': {e}")
        await db.rollback()
        return None


async def add_article(db: AsyncSession, data: Mapping, author_id: Optional[int] = None) -> Optional[Article]:
    """Insert an article (slug from the title) followed by its translations."""
    try:
        values = {k: data[k] for k in ARTICLE_FIELDS if k in data}
        article = Article(**values, slug=slugify_name(data["title"]), author_id=author_id)
        db.add(article)
        await db.flush()

        translations = data.get("translations") or []
        if translations:
            db.add_all(_translation_rows(article.id, translations))

        await db.commit()
        logger.info(f"📝 Article added: {article.slug} (id={article.id})")
    except SQLAlchemyError as e:
        logger.error(f"Error adding article: {e}")
        await db.rollback()
        return None

    return await get_article(db, article.id)


async def update_article(db: AsyncSession, article_id: int, data: Mapping) -> bool:
    """
    Apply the given fields to an article.

    A new title re-derives the slug. A non-empty `translations` list replaces
    the stored translations (delete then insert).
    """
    try:
        article = await db.get(Article, article_id)
        if article is None:
            return False

        for key in ARTICLE_FIELDS:
            if key in data:
                setattr(article, key, data[key])
        if data.get("title"):
            article.slug = slugify_name(data["title"])

        translations = data.get("translations")
        if translations:
            await db.execute(delete(ArticleTranslation).where(ArticleTranslation.article_id == article_id))
            db.add_all(_translation_rows(article_id, translations))

        await db.commit()
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error updating article {article_id}: {e}")
        await db.rollback()
        return False


async def set_featured(db: AsyncSession, article_id: int, is_featured: bool) -> Optional[Article]:
    """Set the featured flag to an explicit value."""
    if not await update_article(db, article_id, {"is_featured": is_featured}):
        return None
    return await get_article(db, article_id)


async def toggle_featured(db: AsyncSession, article_id: int) -> Optional[Article]:
    """Flip the featured flag."""
    try:
        article = await db.get(Article, article_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching article {article_id}: {e}")
        await db.rollback()
        return None
    if article is None:
        return None
    return await set_featured(db, article_id, not article.is_featured)


async def delete_article(db: AsyncSession, article_id: int) -> bool:
    """Delete the translations, then the article."""
    try:
        await db.execute(delete(ArticleTranslation).where(ArticleTranslation.article_id == article_id))
        result = await db.execute(delete(Article).where(Article.id == article_id))
        await db.commit()
        return result.rowcount > 0
    except SQLAlchemyError as e:
        logger.error(f"Error deleting article {article_id}: {e}")
        await db.rollback()
        return False


async def get_article_translation(
        db: AsyncSession,
        article_id: int,
        language_id: int) -> Optional[ArticleTranslation]:
    try:
        result = await db.execute(
            select(ArticleTranslation).where(
                ArticleTranslation.article_id == article_id,
                ArticleTranslation.language_id == language_id,
            )
        )
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching translation of article {article_id}: {e}")
        await db.rollback()
        return None


async def upsert_article_translation(
        db: AsyncSession,
        article_id: int,
        language_id: int,
        title: str,
        description: str = "") -> Optional[ArticleTranslation]:
    """Insert or update the single (article, language) translation row."""
    try:
        result = await db.execute(
            select(ArticleTranslation).where(
                ArticleTranslation.article_id == article_id,
                ArticleTranslation.language_id == language_id,
            )
        )
        translation = result.scalar_one_or_none()
        if translation is None:
            translation = ArticleTranslation(article_id=article_id, language_id=language_id)
            db.add(translation)

        translation.title = title
        translation.description = description or ""
        await db.commit()
        await db.refresh(translation)
        return translation
    except SQLAlchemyError as e:
        logger.error(f"Error saving translation of article {article_id}: {e}")
        await db.rollback()
        return None
