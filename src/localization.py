"""Pick the display text for a language out of already-fetched translations."""
from typing import Iterable, List, Optional


def find_translation(translations: Iterable, language_id: Optional[int]):
    """Return the translation row for the language, or None."""
    if language_id is None:
        return None
    for translation in translations or []:
        if translation.language_id == language_id:
            return translation
    return None


def localize_article(article, language_id: Optional[int] = None) -> dict:
    """
    Title/description of an article in the requested language.

    Falls back to the article's own content when no language is selected
    or the language has no translation. `language_id` in the result is the
    language actually used (None for the original content).
    """
    translation = find_translation(article.translations, language_id)
    if translation is None:
        return {
            "title": article.title,
            "description": article.description,
            "language_id": None,
        }
    return {
        "title": translation.title or article.title,
        "description": translation.description or article.description,
        "language_id": translation.language_id,
    }


def localize_name(item, language_id: Optional[int] = None) -> str:
    """Category/subcategory name in the requested language, else the original name."""
    translation = find_translation(item.translations, language_id)
    if translation is None or not translation.name:
        return item.name
    return translation.name


def available_languages(translations: Iterable, languages: Optional[Iterable] = None) -> List:
    """
    Active languages that have a translation, in translation order.

    When `languages` is omitted each translation's loaded `language`
    relationship is used instead.
    """
    if languages is None:
        candidates = [getattr(t, "language", None) for t in translations or []]
    else:
        by_id = {language.id: language for language in languages}
        candidates = [by_id.get(t.language_id) for t in translations or []]

    seen = set()
    result = []
    for language in candidates:
        if language is None or not language.is_active or language.id in seen:
            continue
        seen.add(language.id)
        result.append(language)
    return result
