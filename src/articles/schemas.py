from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.constants import VALIDATION
from src.languages.schemas import LanguageResponse

TITLE_FIELD = dict(min_length=VALIDATION["TITLE_MIN_LENGTH"], max_length=VALIDATION["TITLE_MAX_LENGTH"])


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _require_description(v: str) -> str:
    if not v.strip():
        raise ValueError("description is required")
    return v


# ========== ArticleTranslation Schemas ==========

class ArticleTranslationBase(BaseModel):
    """Base schema for ArticleTranslation."""
    title: str = Field(..., **TITLE_FIELD, description="Translated title")
    description: str = Field("", description="Translated rich text content")


class ArticleTranslationCreate(ArticleTranslationBase):
    """Translation submitted together with an article."""
    language_id: int = Field(..., gt=0)


class ArticleTranslationResponse(ArticleTranslationBase):
    """Schema for ArticleTranslation response."""
    language_id: int

    model_config = ConfigDict(from_attributes=True)


# ========== Article Schemas ==========

class ArticleBase(BaseModel):
    """Fields collected by the article form."""
    title: str = Field(..., **TITLE_FIELD, description="Article title")
    description: str = Field(..., min_length=1, description="Rich text content (HTML)")
    category_id: int = Field(..., gt=0, description="Category ID")
    subcategory_id: int | None = Field(None, gt=0, description="Optional subcategory ID")
    audio_url: str | None = None
    youtube_url: str | None = None
    external_video_url: str | None = None

    @field_validator("subcategory_id", "audio_url", "youtube_url", "external_video_url", mode="before")
    @classmethod
    def _empty_is_null(cls, v):
        return _blank_to_none(v)

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, v: str) -> str:
        return _require_description(v)


class ArticleCreate(ArticleBase):
    """Schema for creating an Article."""
    is_featured: bool = False
    translations: list[ArticleTranslationCreate] = []


class ArticleUpdate(BaseModel):
    """Schema for updating an Article; only the fields sent are applied."""
    # Omitted fields are left alone, but the required ones cannot be cleared with null
    title: str | None = Field(None, **TITLE_FIELD)
    description: str | None = Field(None, min_length=1)
    category_id: int | None = Field(None, gt=0)
    subcategory_id: int | None = Field(None, gt=0)
    audio_url: str | None = None
    youtube_url: str | None = None
    external_video_url: str | None = None
    is_featured: bool | None = None
    translations: list[ArticleTranslationCreate] | None = None

    @field_validator("subcategory_id", "audio_url", "youtube_url", "external_video_url", mode="before")
    @classmethod
    def _empty_is_null(cls, v):
        return _blank_to_none(v)

    @field_validator("title", "description", "category_id", "is_featured")
    @classmethod
    def _not_null(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, v: str) -> str:
        return _require_description(v)


class FeaturedUpdate(BaseModel):
    """Set is_featured explicitly, or flip it when omitted."""
    is_featured: bool | None = None


class TranslationUpsert(BaseModel):
    """Schema for the translate page."""
    title: str = Field(..., **TITLE_FIELD)
    description: str = ""


class NamedRef(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ArticleResponse(BaseModel):
    """Schema for Article response."""
    id: int
    title: str
    slug: str
    author_id: int | None = None
    category_id: int | None = None
    subcategory_id: int | None = None
    description: str
    audio_url: str | None = None
    youtube_url: str | None = None
    external_video_url: str | None = None
    is_featured: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ArticleWithRelations(ArticleResponse):
    """Article with category, subcategory and translations embedded."""
    category: NamedRef | None = None
    subcategory: NamedRef | None = None
    translations: list[ArticleTranslationResponse] = []


class ArticlePage(BaseModel):
    """One page of articles with the exact total count."""
    data: list[ArticleWithRelations]
    count: int
    page: int


# ========== Localized views ==========

class LocalizedContent(BaseModel):
    """Title/description resolved for one language (or the original content)."""
    title: str
    description: str
    language_id: int | None = None


class ArticleDetail(ArticleWithRelations):
    """Public article page: translations, selectable languages and the resolved content."""
    languages: list[LanguageResponse] = []
    content: LocalizedContent
