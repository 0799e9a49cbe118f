from typing import List

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.deps import require_admin
from src.categories import service
from src.categories.schemas import (
    CategoryCreate,
    CategoryPage,
    CategoryTranslationResponse,
    CategoryUpdate,
    CategoryWithTranslations,
    ImageUploadResponse,
    SubcategoryCreate,
    SubcategoryWithTranslations,
    TranslationsPayload,
)
from src.database import get_db
from src.exceptions import not_found, server_error
from src.storage.client import ImageStorage, get_storage

router = APIRouter(prefix="/admin", tags=["Categories"], dependencies=[Depends(require_admin)])


@router.get("/categories", response_model=CategoryPage)
async def list_categories(
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """List categories with translations and subcategories, one page at a time."""
    categories, count = await service.fetch_categories(db, page=page)
    return CategoryPage(
        data=[CategoryWithTranslations.model_validate(c) for c in categories],
        count=count,
        page=page
    )


@router.post("/categories/images", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_category_image(
    name: str = Query(..., min_length=1, description="Category name the image is for"),
    file: UploadFile = File(...),
    storage: ImageStorage = Depends(get_storage)
):
    """Upload a category image and return its public URL."""
    data = await file.read()
    image_url = storage.upload_category_image(data, name, file.content_type)
    if not image_url:
        raise server_error()
    return ImageUploadResponse(image_url=image_url)


@router.post("/categories", response_model=CategoryWithTranslations, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a category with its translations."""
    created = await service.add_category(db, category.name, category.image_url, category.translations)
    if created is None:
        raise server_error()
    return created


@router.get("/categories/{category_id}", response_model=CategoryWithTranslations)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    category = await service.get_category(db, category_id)
    if category is None:
        raise not_found("Category", category_id)
    return category


@router.put("/categories/{category_id}", response_model=CategoryWithTranslations)
async def update_category(
    category_id: int,
    category: CategoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    if await service.get_category(db, category_id) is None:
        raise not_found("Category", category_id)

    updated = await service.update_category(db, category_id, category.model_dump(exclude_unset=True))
    if updated is None:
        raise server_error()
    return updated


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    storage: ImageStorage = Depends(get_storage)
):
    """Delete a category, its subcategories and translations; its articles are unlinked."""
    if await service.get_category(db, category_id) is None:
        raise not_found("Category", category_id)

    if not await service.delete_category(db, category_id, storage):
        raise server_error()


# ========== Subcategories ==========


@router.get("/categories/{category_id}/subcategories", response_model=List[SubcategoryWithTranslations])
async def list_subcategories(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Subcategories of a category (the article form's second select)."""
    return await service.list_subcategories(db, category_id)


@router.post(
    "/categories/{category_id}/subcategories",
    response_model=SubcategoryWithTranslations,
    status_code=status.HTTP_201_CREATED
)
async def create_subcategory(
    category_id: int,
    subcategory: SubcategoryCreate,
    db: AsyncSession = Depends(get_db)
):
    if await service.get_category(db, category_id) is None:
        raise not_found("Category", category_id)

    created = await service.add_subcategory(db, category_id, subcategory.name)
    if created is None:
        raise server_error()
    return created


@router.delete("/subcategories/{subcategory_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subcategory(
    subcategory_id: int,
    db: AsyncSession = Depends(get_db)
):
    if await service.get_subcategory(db, subcategory_id) is None:
        raise not_found("Subcategory", subcategory_id)

    if not await service.delete_subcategory(db, subcategory_id):
        raise server_error()


# ========== Translations ==========


async def _load_translations(db: AsyncSession, owner: str, item_id: int):
    return [
        CategoryTranslationResponse.model_validate(t)
        for t in await service.get_translations(db, owner, item_id)
    ]


@router.get("/categories/{category_id}/translations", response_model=List[CategoryTranslationResponse])
async def list_category_translations(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Translations of a category."""
    if await service.get_category(db, category_id) is None:
        raise not_found("Category", category_id)
    return await _load_translations(db, service.CATEGORY, category_id)


@router.put("/categories/{category_id}/translations", response_model=List[CategoryTranslationResponse])
async def replace_category_translations(
    category_id: int,
    payload: TranslationsPayload,
    db: AsyncSession = Depends(get_db)
):
    """Replace every translation of a category."""
    if await service.get_category(db, category_id) is None:
        raise not_found("Category", category_id)

    if not await service.save_translations(db, service.CATEGORY, category_id, payload.translations):
        raise server_error()
    return await _load_translations(db, service.CATEGORY, category_id)


@router.get("/subcategories/{subcategory_id}/translations", response_model=List[CategoryTranslationResponse])
async def list_subcategory_translations(
    subcategory_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Translations of a subcategory."""
    if await service.get_subcategory(db, subcategory_id) is None:
        raise not_found("Subcategory", subcategory_id)
    return await _load_translations(db, service.SUBCATEGORY, subcategory_id)


@router.put("/subcategories/{subcategory_id}/translations", response_model=List[CategoryTranslationResponse])
async def replace_subcategory_translations(
    subcategory_id: int,
    payload: TranslationsPayload,
    db: AsyncSession = Depends(get_db)
):
    """Replace every translation of a subcategory."""
    if await service.get_subcategory(db, subcategory_id) is None:
        raise not_found("Subcategory", subcategory_id)

    if not await service.save_translations(db, service.SUBCATEGORY, subcategory_id, payload.translations):
        raise server_error()
    return await _load_translations(db, service.SUBCATEGORY, subcategory_id)
