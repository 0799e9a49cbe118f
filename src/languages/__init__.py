from src.languages.models import Language
from src.languages.schemas import LanguageBase, LanguageCreate, LanguageResponse

__all__ = [
    # Models
    "Language",
    # Schemas
    "LanguageBase",
    "LanguageCreate",
    "LanguageResponse",
]
