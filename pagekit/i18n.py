from fastapi import Request

from pagekit.config import settings
from pagekit.services.locales import primary_language


def ui_langs() -> set[str]:
    langs = {primary_language(locale) for locale in settings.PAGES.support_locales}
    langs.add(settings.SOURCE_LANGUAGE)
    return langs


def pick_lang(request: Request, default_lang: str | None = None) -> str:
    """Interface language of a request: ``?lang=``, then the cookie, then the default."""
    langs = ui_langs()
    q = request.query_params.get("lang")
    if q in langs:
        return q
    cookie = request.cookies.get("lang")
    if cookie in langs:
        return cookie
    return default_lang or settings.SOURCE_LANGUAGE
