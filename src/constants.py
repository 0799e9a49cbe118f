"""Shared constants for validation, paging and error messages."""

VALIDATION = {
    "TITLE_MIN_LENGTH": 3,
    "TITLE_MAX_LENGTH": 100,
    "NAME_MAX_LENGTH": 200,
    "LANGUAGE_CODE_MIN_LENGTH": 2,
    "LANGUAGE_CODE_MAX_LENGTH": 10,
}

ERROR_MESSAGES = {
    "INVALID_CREDENTIALS": "Invalid email or password",
    "SERVER_ERROR": "An error occurred. Please try again later.",
    "UNAUTHORIZED": "You are not authorized to access this resource",
}

PAGINATION = {
    "DEFAULT_PAGE_SIZE": 10,
}

FEATURED_ARTICLES_LIMIT = 6

# Object storage layout
IMAGES_BUCKET = "images"
CATEGORY_IMAGES_PREFIX = "categories"
IMAGE_CACHE_CONTROL = "max-age=3600"
