from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from src.database import Base


class Language(Base):
    """Language a translation can be written in."""

    __tablename__ = "language"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    code = Column(String(10), unique=True, nullable=False, index=True)  # "en", "om", etc.
    name = Column(String(100), nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Language(id={self.id}, code='{self.code}', is_default={self.is_default}, is_active={self.is_active})>"
