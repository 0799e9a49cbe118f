"""Public listing and detail pages."""
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from src.articles.schemas import (
    ArticleDetail,
    ArticleResponse,
    ArticleWithRelations,
    LocalizedContent,
)
from src.articles.service import fetch_featured_articles, get_article_by_slug
from src.categories.schemas import (
    CategoryResponse,
    CategoryTranslationResponse,
    CategoryWithTranslations,
    SubcategoryResponse,
)
from src.categories.service import fetch_categories, get_category_by_slug, get_subcategory_by_slug
from src.database import get_db
from src.exceptions import not_found
from src.languages.schemas import LanguageResponse
from src.languages.service import list_languages
from src.localization import available_languages, localize_article

router = APIRouter(tags=["Public"])


class HomePage(BaseModel):
    featured_articles: list[ArticleWithRelations]
    categories: list[CategoryWithTranslations]


class CategoryWithArticles(CategoryWithTranslations):
    articles: list[ArticleResponse] = []


class SubcategoryWithArticles(SubcategoryResponse):
    translations: list[CategoryTranslationResponse] = []
    articles: list[ArticleResponse] = []

    model_config = ConfigDict(from_attributes=True)


@router.get("/", response_model=HomePage)
async def home(db: AsyncSession = Depends(get_db)):
    """Featured articles and the full category tree."""
    featured = await fetch_featured_articles(db)
    categories, _ = await fetch_categories(db)
    return HomePage(
        featured_articles=[ArticleWithRelations.model_validate(a) for a in featured],
        categories=[CategoryWithTranslations.model_validate(c) for c in categories],
    )


@router.get("/languages", response_model=List[LanguageResponse])
async def active_languages(db: AsyncSession = Depends(get_db)):
    return await list_languages(db, active_only=True)


@router.get("/categories/{slug}/subcategories", response_model=CategoryWithTranslations)
async def category_subcategories(slug: str, db: AsyncSession = Depends(get_db)):
    """Category page listing its subcategories."""
    category = await get_category_by_slug(db, slug)
    if category is None:
        raise not_found("Category", slug)
    return category


@router.get("/categories/{slug}/articles", response_model=CategoryWithArticles)
async def category_articles(slug: str, db: AsyncSession = Depends(get_db)):
    """Category page with its subcategories and articles."""
    category = await get_category_by_slug(db, slug, with_articles=True)
    if category is None:
        raise not_found("Category", slug)
    return category


@router.get("/subcategories/{slug}", response_model=SubcategoryWithArticles)
async def subcategory_articles(slug: str, db: AsyncSession = Depends(get_db)):
    subcategory = await get_subcategory_by_slug(db, slug)
    if subcategory is None:
        raise not_found("Subcategory", slug)
    return subcategory


@router.get("/articles/{slug}", response_model=ArticleDetail)
async def article_detail(
    slug: str,
    language_id: int | None = Query(None, description="Language to display; original content when omitted"),
    db: AsyncSession = Depends(get_db)
):
    """
    Article page.

    All translations come back with the article; `content` is resolved from
    them for `language_id` and falls back to the original text when that
    language has no translation.
    """
    article = await get_article_by_slug(db, slug)
    if article is None:
        raise not_found("Article", slug)

    base = ArticleWithRelations.model_validate(article)
    return ArticleDetail(
        **base.model_dump(),
        languages=[LanguageResponse.model_validate(l) for l in available_languages(article.translations)],
        content=LocalizedContent(**localize_article(article, language_id)),
    )
