"""Import every model so they are all registered on Base.metadata."""
from src.articles.models import Article, ArticleTranslation  # noqa: F401
from src.auth.models import User  # noqa: F401
from src.categories.models import Category, CategoryTranslation, Subcategory  # noqa: F401
from src.languages.models import Language  # noqa: F401
