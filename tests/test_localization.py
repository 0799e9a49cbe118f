"""Tests for src.localization (language fallback on already-fetched translations)."""

from types import SimpleNamespace

from src.localization import available_languages, find_translation, localize_article, localize_name


def _article(translations):
    return SimpleNamespace(title="Coffee Ceremony", description="<p>Original</p>", translations=translations)


def _translation(language_id, **fields):
    return SimpleNamespace(language_id=language_id, **fields)


class TestLocalizeArticle:
    """Tests for localize_article."""

    def test_uses_translation_for_language(self):
        article = _article([_translation(2, title="Sirna Buna", description="<p>Om</p>")])

        content = localize_article(article, 2)

        assert content == {"title": "Sirna Buna", "description": "<p>Om</p>", "language_id": 2}

    def test_missing_translation_falls_back_to_original(self):
        article = _article([_translation(2, title="Sirna Buna", description="<p>Om</p>")])

        content = localize_article(article, 3)

        assert content == {"title": "Coffee Ceremony", "description": "<p>Original</p>", "language_id": None}

    def test_no_language_selected_is_original(self):
        article = _article([_translation(2, title="Sirna Buna", description="<p>Om</p>")])

        assert localize_article(article)["title"] == "Coffee Ceremony"

    def test_empty_translated_description_keeps_original_text(self):
        article = _article([_translation(2, title="Sirna Buna", description="")])

        content = localize_article(article, 2)

        assert content["title"] == "Sirna Buna"
        assert content["description"] == "<p>Original</p>"


class TestLocalizeName:
    """Tests for localize_name."""

    def test_translated_name(self):
        item = SimpleNamespace(name="History", translations=[_translation(2, name="Seenaa")])
        assert localize_name(item, 2) == "Seenaa"

    def test_fallback_name(self):
        item = SimpleNamespace(name="History", translations=[])
        assert localize_name(item, 2) == "History"


class TestAvailableLanguages:
    """Tests for available_languages."""

    def test_only_active_languages_with_translations(self):
        en = SimpleNamespace(id=1, is_active=True)
        om = SimpleNamespace(id=2, is_active=True)
        fr = SimpleNamespace(id=3, is_active=False)
        translations = [_translation(2), _translation(3)]

        assert available_languages(translations, [en, om, fr]) == [om]

    def test_uses_loaded_language_relationship(self):
        om = SimpleNamespace(id=2, is_active=True)
        translations = [SimpleNamespace(language_id=2, language=om)]

        assert available_languages(translations) == [om]

    def test_find_translation_none_language(self):
        assert find_translation([_translation(1)], None) is None
