from src.auth.models import STAFF_ROLES, User, UserRole
from src.auth.schemas import SessionResponse, UserLogin, UserResponse

__all__ = [
    # Models
    "User",
    "UserRole",
    "STAFF_ROLES",
    # Schemas
    "UserLogin",
    "UserResponse",
    "SessionResponse",
]
