import logging
from typing import Protocol

from fastapi.responses import RedirectResponse
from sqlalchemy import select
from sqlalchemy.orm import Session

from pagekit.models.redirect import Redirect

logger = logging.getLogger(__name__)


class RedirectService(Protocol):
    def check(self, url: str) -> RedirectResponse | None: ...


class DBRedirects:
    """Redirects stored in the ``redirects`` table, matched on the request URL."""

    def __init__(self, db: Session):
        self._db = db

    def check(self, url: str) -> RedirectResponse | None:
        row = self._db.execute(
            select(Redirect).where(
                Redirect.request_url == url, Redirect.is_active == True
            )
        ).scalar_one_or_none()
        if row is None:
            return None
        logger.info("Redirecting %s -> %s (%s)", url, row.redirect_url, row.code)
        return RedirectResponse(url=row.redirect_url, status_code=row.code)
