"""
Seed script to populate the database with sample data.

This script creates languages, an admin user and sample categories,
subcategories and articles with translations.
Run this script to populate the database for testing purposes.
"""

import asyncio
import os

from sqlalchemy import select, text

from src.articles.models import Article, ArticleTranslation
from src.auth.models import User, UserRole
from src.auth.service import get_password_hash
from src.categories.models import Category, CategoryTranslation, Subcategory
from src.database import async_session_maker, init_db
from src.languages.models import Language
from src.slugs import slugify_name


# ========== SEED DATA ==========

LANGUAGES_DATA = [
    {"code": "en", "name": "English", "is_default": True},
    {"code": "om", "name": "Afaan Oromoo", "is_default": False},
    {"code": "am", "name": "አማርኛ", "is_default": False},
]

ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "change-me")

CATEGORIES_DATA = {
    "History": {
        "translations": {"om": "Seenaa", "am": "ታሪክ"},
        "subcategories": {
            "Ancient Kingdoms": {"om": "Mootummoota Durii"},
            "Modern Era": {"om": "Bara Ammayyaa"},
        },
        "articles": [
            {
                "title": "The Gadaa System",
                "subcategory": "Ancient Kingdoms",
                "description": "<p>An overview of the Gadaa system of governance.</p>",
                "is_featured": True,
                "translations": {
                    "om": ("Sirna Gadaa", "<p>Waa'ee sirna Gadaa.</p>"),
                },
            },
            {
                "title": "Railways of the Twentieth Century",
                "subcategory": "Modern Era",
                "description": "<p>How the railway changed trade routes.</p>",
                "is_featured": False,
                "translations": {},
            },
        ],
    },
    "Culture": {
        "translations": {"om": "Aadaa", "am": "ባህል"},
        "subcategories": {
            "Music": {"om": "Muuziqaa"},
            "Food": {"om": "Nyaata", "am": "ምግብ"},
        },
        "articles": [
            {
                "title": "Coffee Ceremony",
                "subcategory": "Food",
                "description": "<p>The coffee ceremony step by step.</p>",
                "is_featured": True,
                "youtube_url": "https://www.youtube.com/watch?v=example",
                "translations": {
                    "om": ("Sirna Buna", "<p>Sirna bunaa tartiiba isaatiin.</p>"),
                    "am": ("የቡና ሥነ ሥርዓት", "<p>የቡና ሥነ ሥርዓት።</p>"),
                },
            },
        ],
    },
    "Science": {
        "translations": {"om": "Saayinsii"},
        "subcategories": {},
        "articles": [],
    },
}


async def clear_database():
    """Clear all data from the database."""
    print("🗑️  Clearing database...")

    async with async_session_maker() as session:
        for table in (
            "article_translation",
            "article",
            "category_translation",
            "subcategory",
            "category",
            "language",
            '"user"',
        ):
            await session.execute(text(f"DELETE FROM {table}"))
        await session.commit()

    print("✅ Database cleared!")


async def seed_database():
    """Seed the database with sample data."""

    # Initialize database tables
    print("🔧 Initializing database...")
    await init_db()

    # Clear existing data first
    await clear_database()

    async with async_session_maker() as session:
        print("🌱 Seeding database with sample data...")

        languages = {}
        for language_data in LANGUAGES_DATA:
            language = Language(**language_data, is_active=True)
            session.add(language)
            await session.flush()
            languages[language.code] = language

        admin = User(
            email=ADMIN_EMAIL,
            full_name="Site Admin",
            hashed_password=get_password_hash(ADMIN_PASSWORD),
            role=UserRole.ADMIN.value,
        )
        session.add(admin)
        await session.flush()

        total_categories = 0
        total_articles = 0

        for category_name, category_data in CATEGORIES_DATA.items():
            category = Category(name=category_name, slug=slugify_name(category_name), image_url="")
            session.add(category)
            await session.flush()

            for code, name in category_data["translations"].items():
                session.add(CategoryTranslation(
                    category_id=category.id,
                    language_id=languages[code].id,
                    name=name
                ))

            subcategories = {}
            for sub_name, sub_translations in category_data["subcategories"].items():
                subcategory = Subcategory(
                    category_id=category.id,
                    name=sub_name,
                    slug=slugify_name(sub_name)
                )
                session.add(subcategory)
                await session.flush()
                subcategories[sub_name] = subcategory

                for code, name in sub_translations.items():
                    session.add(CategoryTranslation(
                        subcategory_id=subcategory.id,
                        language_id=languages[code].id,
                        name=name
                    ))

            for article_data in category_data["articles"]:
                subcategory = subcategories.get(article_data.get("subcategory"))
                article = Article(
                    title=article_data["title"],
                    slug=slugify_name(article_data["title"]),
                    author_id=admin.id,
                    category_id=category.id,
                    subcategory_id=subcategory.id if subcategory else None,
                    description=article_data["description"],
                    youtube_url=article_data.get("youtube_url"),
                    is_featured=article_data["is_featured"],
                )
                session.add(article)
                await session.flush()

                for code, (title, description) in article_data["translations"].items():
                    session.add(ArticleTranslation(
                        article_id=article.id,
                        language_id=languages[code].id,
                        title=title,
                        description=description
                    ))

                total_articles += 1

            total_categories += 1
            print(f"   ✓ {category_name}: {len(subcategories)} subcategories, {len(category_data['articles'])} articles")

        await session.commit()

        print("\n✅ Database seeded successfully!")
        print(f"\n📊 Summary:")
        print(f"   - {len(languages)} languages created")
        print(f"   - {total_categories} categories created")
        print(f"   - {total_articles} articles created")
        print(f"   - Admin user: {ADMIN_EMAIL}")
        print(f"\n🚀 You can now test the API at http://localhost:8000/docs")


async def seed_if_empty():
    """Seed the database only if it's empty (no languages exist)."""
    await init_db()
    async with async_session_maker() as session:
        result = await session.execute(select(Language).limit(1))
        existing = result.scalar_one_or_none()

        if existing:
            print("📦 Database already has data, skipping seed.")
            return False

    print("🌱 Database is empty, running seed...")
    await seed_database()
    return True


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "clear":
        asyncio.run(clear_database())
    else:
        asyncio.run(seed_database())
