from typing import Protocol, runtime_checkable


@runtime_checkable
class TranslationService(Protocol):
    """Languages known to the host application."""

    hide_default_lang: bool

    def get_locales(self) -> list[dict]:
        """Active languages as ``{"url": "en", "locale": "en-US"}`` items."""

    def get_default_lang(self) -> str: ...


class StaticTranslations:
    """Fixed language table, for hosts without a translations backend of their own."""

    def __init__(self, locales: list[dict], default_lang: str, hide_default_lang: bool = False):
        self._locales = list(locales)
        self._default_lang = default_lang
        self.hide_default_lang = hide_default_lang

    def get_locales(self) -> list[dict]:
        return list(self._locales)

    def get_default_lang(self) -> str:
        return self._default_lang
