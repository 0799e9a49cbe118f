from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.constants import VALIDATION


# ========== CategoryTranslation Schemas ==========

class TranslationName(BaseModel):
    """Translated name entered in the translation modal."""
    name: str = Field("", max_length=VALIDATION["NAME_MAX_LENGTH"], description="Translated name")


class CategoryTranslationResponse(BaseModel):
    """Schema for CategoryTranslation response."""
    language_id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class TranslationsPayload(BaseModel):
    """Full set of translations for one category or subcategory, keyed by language id."""
    translations: dict[int, TranslationName] = Field(default_factory=dict)


# ========== Subcategory Schemas ==========

class SubcategoryCreate(BaseModel):
    """Schema for creating a Subcategory."""
    name: str = Field(..., min_length=1, max_length=VALIDATION["NAME_MAX_LENGTH"], description="Subcategory name")


class SubcategoryResponse(BaseModel):
    """Schema for Subcategory response."""
    id: int
    category_id: int
    name: str
    slug: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class SubcategoryWithTranslations(SubcategoryResponse):
    """Subcategory with its translations embedded."""
    translations: list[CategoryTranslationResponse] = []


# ========== Category Schemas ==========

class CategoryCreate(BaseModel):
    """Schema for creating a Category."""
    name: str = Field(..., min_length=1, max_length=VALIDATION["NAME_MAX_LENGTH"], description="Category name")
    image_url: str = Field("", max_length=1024, description="Public URL of the uploaded image")
    translations: dict[int, TranslationName] = Field(default_factory=dict)


class CategoryUpdate(BaseModel):
    """Schema for updating a Category."""
    name: str | None = Field(None, min_length=1, max_length=VALIDATION["NAME_MAX_LENGTH"])
    image_url: str | None = Field(None, max_length=1024)


class CategoryResponse(BaseModel):
    """Schema for Category response."""
    id: int
    name: str
    slug: str
    image_url: str = ""
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CategoryWithTranslations(CategoryResponse):
    """Category with translations and subcategories embedded."""
    translations: list[CategoryTranslationResponse] = []
    subcategories: list[SubcategoryWithTranslations] = []


class CategoryPage(BaseModel):
    """One page of categories with the exact total count."""
    data: list[CategoryWithTranslations]
    count: int
    page: int


class ImageUploadResponse(BaseModel):
    image_url: str
