"""HTTP errors shared by the routers."""
from fastapi import HTTPException, status

from src.constants import ERROR_MESSAGES


def server_error() -> HTTPException:
    """Generic failure shown when a data-access call came back empty-handed."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=ERROR_MESSAGES["SERVER_ERROR"]
    )


def not_found(what: str, key) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{what} {key!r} not found" if isinstance(key, str) else f"{what} with id {key} not found"
    )
