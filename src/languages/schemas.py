from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.constants import VALIDATION


# ========== Language Schemas ==========

class LanguageBase(BaseModel):
    """Base schema for Language."""
    code: str = Field(
        ...,
        min_length=VALIDATION["LANGUAGE_CODE_MIN_LENGTH"],
        max_length=VALIDATION["LANGUAGE_CODE_MAX_LENGTH"],
        description="Language code (e.g. 'en', 'om')",
    )
    name: str = Field(..., min_length=1, max_length=100, description="Display name (e.g. 'English')")
    is_default: bool = False
    is_active: bool = True


class LanguageCreate(LanguageBase):
    """Schema for creating a Language."""
    pass


class LanguageResponse(LanguageBase):
    """Schema for Language response."""
    id: int
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
