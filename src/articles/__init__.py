from src.articles.models import Article, ArticleTranslation
from src.articles.schemas import (
    ArticleCreate,
    ArticleDetail,
    ArticlePage,
    ArticleResponse,
    ArticleTranslationCreate,
    ArticleTranslationResponse,
    ArticleUpdate,
    ArticleWithRelations,
    FeaturedUpdate,
    LocalizedContent,
    TranslationUpsert,
)

__all__ = [
    # Models
    "Article",
    "ArticleTranslation",
    # Schemas - Article
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleWithRelations",
    "ArticlePage",
    "ArticleDetail",
    "FeaturedUpdate",
    "LocalizedContent",
    # Schemas - ArticleTranslation
    "ArticleTranslationCreate",
    "ArticleTranslationResponse",
    "TranslationUpsert",
]
