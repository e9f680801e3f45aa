from sqlalchemy import select
from sqlalchemy.orm import Session

from pagekit.errors import NOT_FOUND_MESSAGE

# source-language texts of every message the pages module shows
MESSAGES = {
    "pages.not_found": NOT_FOUND_MESSAGE,
    "pages.status.all": "All statuses",
    "pages.status.draft": "Draft",
    "pages.status.published": "Published",
    "pages.parents.all": "-- All pages --",
    "pages.parents.root": "-- Root page --",
}


def message(key: str, i18n=None) -> str:
    """Text for ``key`` in the catalog's language, or the source text without one."""
    if i18n is None:
        return MESSAGES.get(key, key)
    return i18n.t(key)


class DBI18n:
    """
    Page messages in one language. Overrides live in the ui_string table,
    anything not overridden falls back to MESSAGES.
    All overrides for the language are loaded on first use (one instance per request).
    """

    __slots__ = ("lang", "_overrides", "_db")

    def __init__(self, db: Session, lang: str):
        self.lang = lang
        self._overrides = None
        self._db = db

    def t(self, key: str, default: str | None = None) -> str:
        if self._overrides is None:
            self._overrides = self._load()
        if key in self._overrides:
            return self._overrides[key]
        return default or MESSAGES.get(key, key)

    def _load(self) -> dict[str, str]:
        from pagekit.models.ui_string import UIString

        rows = self._db.execute(
            select(UIString.key, UIString.value).where(
                UIString.lang == self.lang, UIString.key.startswith("pages.")
            )
        )
        return {row.key: row.value for row in rows}
