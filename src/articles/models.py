from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import relationship

from src.database import Base


class Article(Base):
    """Article model for database."""

    __tablename__ = "article"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=True, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategory.id"), nullable=True, index=True)
    description = Column(Text, nullable=False, default="")  # rich text (HTML)
    audio_url = Column(String(1024), nullable=True)
    youtube_url = Column(String(1024), nullable=True)
    external_video_url = Column(String(1024), nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    category = relationship("Category", back_populates="articles", foreign_keys=[category_id])
    subcategory = relationship("Subcategory", back_populates="articles", foreign_keys=[subcategory_id])
    author = relationship("User")

    # Relationship with ArticleTranslation (one-to-many)
    translations = relationship("ArticleTranslation", back_populates="article")

    def __repr__(self):
        return f"<Article(id={self.id}, slug='{self.slug}', is_featured={self.is_featured})>"


class ArticleTranslation(Base):
    """ArticleTranslation model for article translations."""

    __tablename__ = "article_translation"
    __table_args__ = (UniqueConstraint("article_id", "language_id"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    article_id = Column(Integer, ForeignKey("article.id"), nullable=False, index=True)
    language_id = Column(Integer, ForeignKey("language.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")

    # Relationship with Article (many-to-one)
    article = relationship("Article", back_populates="translations")
    language = relationship("Language")

    def __repr__(self):
        return f"<ArticleTranslation(id={self.id}, article_id={self.article_id}, language_id={self.language_id})>"
