from src.categories.models import Category, CategoryTranslation, Subcategory
from src.categories.schemas import (
    CategoryCreate,
    CategoryPage,
    CategoryResponse,
    CategoryTranslationResponse,
    CategoryUpdate,
    CategoryWithTranslations,
    ImageUploadResponse,
    SubcategoryCreate,
    SubcategoryResponse,
    SubcategoryWithTranslations,
    TranslationName,
    TranslationsPayload,
)

__all__ = [
    # Models
    "Category",
    "Subcategory",
    "CategoryTranslation",
    # Schemas - Category
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryWithTranslations",
    "CategoryPage",
    "ImageUploadResponse",
    # Schemas - Subcategory
    "SubcategoryCreate",
    "SubcategoryResponse",
    "SubcategoryWithTranslations",
    # Schemas - CategoryTranslation
    "TranslationName",
    "TranslationsPayload",
    "CategoryTranslationResponse",
]
