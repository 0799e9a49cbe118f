"""Tests for src.languages.service."""

from src.languages import service
from src.languages.schemas import LanguageCreate


class TestLanguages:
    """Tests for adding, listing and toggling languages."""

    def test_new_default_clears_previous(self, with_session, languages):
        async def _scenario(db):
            await service.add_language(db, LanguageCreate(code="am", name="Amharic", is_default=True))
            return await service.get_default_language(db), await service.list_languages(db)

        default, all_languages = with_session(_scenario)

        assert default.code == "am"
        assert [l.code for l in all_languages if l.is_default] == ["am"]

    def test_active_only(self, with_session, languages):
        active = with_session(lambda db: service.list_languages(db, active_only=True))

        assert {l.code for l in active} == {"en", "om"}

    def test_toggle_status(self, with_session, languages):
        async def _scenario(db):
            once = (await service.toggle_language_status(db, languages["fr"])).is_active
            twice = (await service.toggle_language_status(db, languages["fr"])).is_active
            return once, twice

        assert with_session(_scenario) == (True, False)

    def test_toggle_missing(self, with_session):
        assert with_session(lambda db: service.toggle_language_status(db, 99)) is None

    def test_duplicate_code_is_swallowed(self, with_session, languages):
        created = with_session(lambda db: service.add_language(db, LanguageCreate(code="en", name="English again")))

        assert created is None

    def test_lookup_by_code(self, with_session, languages):
        language = with_session(lambda db: service.get_language_by_code(db, "om"))

        assert language.id == languages["om"]
