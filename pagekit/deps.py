from fastapi import Depends, Request
from sqlalchemy.orm import Session

from pagekit.config import settings
from pagekit.db import get_db
from pagekit.services.i18n_db import DBI18n
from pagekit.services.redirects import DBRedirects
from pagekit.services.resolver import PageResolver
from pagekit.ui import active_lang, templates


def get_translations(request: Request):
    # hosts with a translations backend register it on app.state
    return getattr(request.app.state, "translations", None)


def get_i18n(request: Request, db: Session = Depends(get_db)) -> DBI18n:
    return DBI18n(db, active_lang(request))


def get_resolver(
    db: Session = Depends(get_db),
    translations=Depends(get_translations),
    i18n: DBI18n = Depends(get_i18n),
) -> PageResolver:
    return PageResolver(
        db,
        settings.PAGES,
        settings.SOURCE_LANGUAGE,
        translations=translations,
        redirects=DBRedirects(db),
        i18n=i18n,
        renderer=templates,
    )
