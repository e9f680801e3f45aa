import re
from typing import Iterable

_SUBTAG_SEP = re.compile(r"[-_]")


def primary_language(locale: str | None) -> str:
    """Primary language subtag of a locale: ``en-US`` -> ``en``."""
    if not locale:
        return ""
    return _SUBTAG_SEP.split(locale, 1)[0].lower()


def match_locale(lang: str, support_locales: Iterable[str] | None) -> str | None:
    """First supported locale for a URL language code, or None."""
    if not lang or not support_locales:
        return None
    for locale in support_locales:
        if lang == locale or lang == primary_language(locale):
            return locale
    return None


def locales_by_url(locales: Iterable[dict]) -> dict[str, str]:
    """Map ``url`` -> ``locale`` from a translations collaborator listing."""
    return {
        item["url"]: item["locale"]
        for item in locales
        if item.get("url") and item.get("locale")
    }
