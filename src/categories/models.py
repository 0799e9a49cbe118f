from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from src.database import Base


class Category(Base):
    """Top level of the article taxonomy."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(255), nullable=False, index=True)  # not unique
    image_url = Column(String(1024), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationship with Subcategory (one-to-many)
    subcategories = relationship(
        "Subcategory",
        back_populates="category",
        order_by="Subcategory.id",
    )

    # Relationship with CategoryTranslation (one-to-many)
    translations = relationship(
        "CategoryTranslation",
        back_populates="category",
        foreign_keys="CategoryTranslation.category_id",
    )

    # Relationship with Article (one-to-many)
    articles = relationship("Article", back_populates="category", foreign_keys="Article.category_id")

    def __repr__(self):
        return f"<Category(id={self.id}, slug='{self.slug}')>"


class Subcategory(Base):
    """Second level of the taxonomy, always under a category."""

    __tablename__ = "subcategory"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationship with Category (many-to-one)
    category = relationship("Category", back_populates="subcategories")

    translations = relationship(
        "CategoryTranslation",
        back_populates="subcategory",
        foreign_keys="CategoryTranslation.subcategory_id",
    )

    articles = relationship("Article", back_populates="subcategory", foreign_keys="Article.subcategory_id")

    def __repr__(self):
        return f"<Subcategory(id={self.id}, category_id={self.category_id}, slug='{self.slug}')>"


class CategoryTranslation(Base):
    """Per-language name for a category or a subcategory (exactly one of the two ids is set)."""

    __tablename__ = "category_translation"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategory.id"), nullable=True, index=True)
    language_id = Column(Integer, ForeignKey("language.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)

    category = relationship("Category", back_populates="translations", foreign_keys=[category_id])
    subcategory = relationship("Subcategory", back_populates="translations", foreign_keys=[subcategory_id])

    def __repr__(self):
        return (
            f"<CategoryTranslation(id={self.id}, category_id={self.category_id}, "
            f"subcategory_id={self.subcategory_id}, language_id={self.language_id}, name='{self.name}')>"
        )
