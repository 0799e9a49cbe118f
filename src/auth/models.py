from enum import Enum

from sqlalchemy import Column, Integer, String

from src.database import Base


class UserRole(str, Enum):
    """User role enum."""
    ADMIN = "admin"
    AUTHOR = "author"
    USER = "user"


# Roles allowed into the admin pages
STAFF_ROLES = {UserRole.ADMIN.value, UserRole.AUTHOR.value}


class User(Base):
    """User model for database."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(200), nullable=False, default="")
    hashed_password = Column(String(255), nullable=False)
    avatar_url = Column(String(1024), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
