"""Data access for categories, subcategories and their translations."""
from typing import List, Mapping, Optional, Tuple

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.articles.models import Article
from src.categories.models import Category, CategoryTranslation, Subcategory
from src.constants import PAGINATION
from src.logging_config import get_logger
from src.slugs import slugify_name
from src.storage.client import ImageStorage

logger = get_logger(__name__)

CATEGORY = "category"
SUBCATEGORY = "subcategory"


def _with_embeds(query):
    """Embed translations and subcategories (with their translations)."""
    return query.options(
        selectinload(Category.translations),
        selectinload(Category.subcategories).selectinload(Subcategory.translations),
    ).execution_options(populate_existing=True)


def _translation_name(content) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, Mapping):
        return content.get("name") or ""
    return getattr(content, "name", "") or ""


def _translation_rows(kind: str, item_id: int, translations: Mapping) -> List[CategoryTranslation]:
    """Build translation rows from a {language_id: {"name": ...}} map, skipping blank names."""
    owner = "category_id" if kind == CATEGORY else "subcategory_id"
    rows = []
    for language_id, content in translations.items():
        name = _translation_name(content).strip()
        if not name:
            continue
        rows.append(CategoryTranslation(**{owner: item_id}, language_id=int(language_id), name=name))
    return rows


# ========== Categories ==========


async def fetch_categories(
        db: AsyncSession,
        page: Optional[int] = None) -> Tuple[List[Category], int]:
    """
    List categories newest first with translations and subcategories embedded.

    With `page` (1-based) only one page of DEFAULT_PAGE_SIZE rows is returned.
    The second element is always the exact total count.
    """
    query = _with_embeds(select(Category)).order_by(Category.created_at.desc(), Category.id.desc())
    if page is not None:
        size = PAGINATION["DEFAULT_PAGE_SIZE"]
        query = query.offset((max(page, 1) - 1) * size).limit(size)

    try:
        result = await db.execute(query)
        categories = list(result.scalars().all())
        count = await db.scalar(select(func.count()).select_from(Category))
        return categories, count or 0
    except SQLAlchemyError as e:
        logger.error(f"Error fetching categories: {e}")
        await db.rollback()
        return [], 0


async def get_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    try:
        result = await db.execute(
            _with_embeds(select(Category))
            .where(Category.id == category_id)
        )
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching category {category_id}: {e}")
        await db.rollback()
        return None


async def get_category_by_slug(
        db: AsyncSession,
        slug: str,
        with_articles: bool = False) -> Optional[Category]:
    """Newest category with the slug (slugs are not unique)."""
    query = _with_embeds(select(Category)).where(Category.slug == slug)
    if with_articles:
        query = query.options(selectinload(Category.articles))
    query = query.order_by(Category.created_at.desc(), Category.id.desc()).limit(1)

    try:
        result = await db.execute(query)
        return result.scalars().first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching category '{slug}': {e}")
        await db.rollback()
        return None


async def add_category(
        db: AsyncSession,
        name: str,
        image_url: str = "",
        translations: Optional[Mapping] = None) -> Optional[Category]:
    """Insert a category and its translations."""
    try:
        category = Category(name=name, slug=slugify_name(name), image_url=image_url or "")
        db.add(category)
        await db.flush()

        if translations:
            db.add_all(_translation_rows(CATEGORY, category.id, translations))

        await db.commit()
        logger.info(f"📁 Category added: {category.slug} (id={category.id})")
    except SQLAlchemyError as e:
        logger.error(f"Error adding category: {e}")
        await db.rollback()
        return None

    return await get_category(db, category.id)


async def update_category(db: AsyncSession, category_id: int, data: Mapping) -> Optional[Category]:
    """Apply the given fields; a new name also re-derives the slug."""
    try:
        category = await db.get(Category, category_id)
        if category is None:
            return None

        if data.get("name") is not None:
            category.name = data["name"]
            category.slug = slugify_name(data["name"])
        if data.get("image_url") is not None:
            category.image_url = data["image_url"]

        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error updating category {category_id}: {e}")
        await db.rollback()
        return None

    return await get_category(db, category_id)


async def delete_category(
        db: AsyncSession,
        category_id: int,
        storage: Optional[ImageStorage] = None) -> bool:
    """
    Delete a category and everything hanging off it.

    Articles are kept but unlinked (category and subcategory set to NULL);
    subcategories and all their translations go away with the category.
    The database work is one commit. The image object is removed afterwards
    and a storage failure does not fail the delete.
    """
    try:
        category = await db.get(Category, category_id)
        if category is None:
            return False
        image_url = category.image_url

        sub_ids = list(
            (await db.execute(select(Subcategory.id).where(Subcategory.category_id == category_id))).scalars()
        )

        article_filter = Article.category_id == category_id
        if sub_ids:
            article_filter = or_(article_filter, Article.subcategory_id.in_(sub_ids))
        await db.execute(
            update(Article).where(article_filter).values(category_id=None, subcategory_id=None)
        )

        translation_filter = CategoryTranslation.category_id == category_id
        if sub_ids:
            translation_filter = or_(translation_filter, CategoryTranslation.subcategory_id.in_(sub_ids))
        await db.execute(delete(CategoryTranslation).where(translation_filter))

        await db.execute(delete(Subcategory).where(Subcategory.category_id == category_id))
        await db.execute(delete(Category).where(Category.id == category_id))
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error deleting category {category_id}: {e}")
        await db.rollback()
        return False

    logger.info(f"🗑️ Category {category_id} deleted with {len(sub_ids)} subcategories")

    if storage is not None and image_url:
        storage.remove_category_image(image_url)

    return True


# ========== Subcategories ==========


async def list_subcategories(db: AsyncSession, category_id: int) -> List[Subcategory]:
    try:
        result = await db.execute(
            select(Subcategory)
            .options(selectinload(Subcategory.translations))
            .where(Subcategory.category_id == category_id)
            .order_by(Subcategory.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error fetching subcategories of {category_id}: {e}")
        await db.rollback()
        return []


async def get_subcategory(db: AsyncSession, subcategory_id: int) -> Optional[Subcategory]:
    try:
        result = await db.execute(
            select(Subcategory)
            .options(selectinload(Subcategory.translations))
            .where(Subcategory.id == subcategory_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching subcategory {subcategory_id}: {e}")
        await db.rollback()
        return None


async def get_subcategory_by_slug(db: AsyncSession, slug: str) -> Optional[Subcategory]:
    """Subcategory page: the newest subcategory with the slug, articles embedded."""
    try:
        result = await db.execute(
            select(Subcategory)
            .options(
                selectinload(Subcategory.translations),
                selectinload(Subcategory.articles),
            )
            .where(Subcategory.slug == slug)
            .order_by(Subcategory.created_at.desc(), Subcategory.id.desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching subcategory '{slug}': {e}")
        await db.rollback()
        return None


async def add_subcategory(db: AsyncSession, category_id: int, name: str) -> Optional[Subcategory]:
    """Insert a subcategory under an existing category."""
    try:
        parent = await db.get(Category, category_id)
        if parent is None:
            logger.warning(f"Cannot add subcategory: category {category_id} does not exist")
            return None

        subcategory = Subcategory(category_id=category_id, name=name, slug=slugify_name(name))
        db.add(subcategory)
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error adding subcategory: {e}")
        await db.rollback()
        return None

    return await get_subcategory(db, subcategory.id)


async def delete_subcategory(db: AsyncSession, subcategory_id: int) -> bool:
    """Delete a subcategory, its translations, and unlink its articles."""
    try:
        subcategory = await db.get(Subcategory, subcategory_id)
        if subcategory is None:
            return False

        await db.execute(
            update(Article).where(Article.subcategory_id == subcategory_id).values(subcategory_id=None)
        )
        await db.execute(
            delete(CategoryTranslation).where(CategoryTranslation.subcategory_id == subcategory_id)
        )
        await db.execute(delete(Subcategory).where(Subcategory.id == subcategory_id))
        await db.commit()
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error deleting subcategory {subcategory_id}: {e}")
        await db.rollback()
        return False


# ========== Translations ==========


def _owner_column(kind: str):
    if kind == CATEGORY:
        return CategoryTranslation.category_id
    if kind == SUBCATEGORY:
        return CategoryTranslation.subcategory_id
    raise ValueError(f"Unknown translation owner: {kind}")


async def get_translations(db: AsyncSession, kind: str, item_id: int) -> List[CategoryTranslation]:
    """Translations of one category or subcategory."""
    column = _owner_column(kind)
    try:
        result = await db.execute(
            select(CategoryTranslation).where(column == item_id).order_by(CategoryTranslation.language_id)
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Error fetching translations of {kind} {item_id}: {e}")
        await db.rollback()
        return []


async def save_translations(db: AsyncSession, kind: str, item_id: int, translations: Mapping) -> bool:
    """Replace the whole translation set of a category or subcategory."""
    column = _owner_column(kind)
    try:
        await db.execute(delete(CategoryTranslation).where(column == item_id))
        db.add_all(_translation_rows(kind, item_id, translations))
        await db.commit()
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error saving translations of {kind} {item_id}: {e}")
        await db.rollback()
        return False
