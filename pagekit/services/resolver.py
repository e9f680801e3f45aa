import logging
import re

from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from starlette.requests import Request

from pagekit.config import PagesConfig
from pagekit.errors import PageNotFound
from pagekit.models.page import STATUS_DRAFT, STATUS_PUBLISHED, Page
from pagekit.services.i18n_db import message
from pagekit.services.locales import locales_by_url, match_locale
from pagekit.ui import common_ctx, templates

logger = logging.getLogger(__name__)

# optional "/prefix/" part followed by the trailing alias-like segment
_URL_ROUTE = re.compile(r"^(/+[A-Za-z0-9_\-/]+/)?([A-Za-z0-9_\-]*)")
_SLASHES = re.compile(r"/{2,}")

ROOT_ROUTE = "/"


def normalize_route(route: str | None) -> str:
    """Collapse repeated slashes and return the route with a single leading slash."""
    path = _SLASHES.sub("/", route or "").strip("/")
    return "/" + path


def derive_route(alias: str, route: str | None, request_url: str) -> str:
    """Route a page is requested under.

    Without an explicit route it is taken from the request URL: when the
    last path segment is the alias, everything before it is the route.
    This is a heuristic for plain ``/prefix/alias`` URLs only.
    """
    if route is None:
        match = _URL_ROUTE.match(request_url or "")
        if match and match.group(2) == alias:
            route = (match.group(1) or "").rstrip("/")
    else:
        route = normalize_route(route)

    return route or ROOT_ROUTE


def current_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url += "?" + request.url.query
    return url


class PageResolver:
    """Finds the page for an alias, route and language and renders it."""

    def __init__(
        self,
        db: Session,
        config: PagesConfig,
        source_language: str,
        translations=None,
        redirects=None,
        i18n=None,
        renderer=None,
    ):
        self.db = db
        self.config = config
        self.translations = translations
        self.redirects = redirects
        self.i18n = i18n
        self.renderer = renderer or templates

        self.default_lang = source_language
        if translations is not None and getattr(translations, "hide_default_lang", False):
            self.default_lang = translations.get_default_lang()

        self._shared_routes = {ROOT_ROUTE, normalize_route(config.base_route)}

    def view(
        self,
        request: Request,
        alias: str,
        route: str | None = None,
        lang: str | None = None,
        draft: bool = False,
    ):
        url = current_url(request)
        if self.redirects is not None:
            redirect = self.redirects.check(url)
            if redirect:
                return redirect

        page, route = self.resolve(alias, route, lang, draft, url)

        layout = self.config.base_layout
        if page.layout:
            layout = page.layout

        return self.renderer.TemplateResponse(
            "pages/index.html",
            common_ctx(
                request,
                {
                    "model": page,
                    "route": route,
                    "layout": layout,
                },
            ),
        )

    def resolve(
        self,
        alias: str,
        route: str | None = None,
        lang: str | None = None,
        draft: bool = False,
        request_url: str = ROOT_ROUTE,
    ) -> tuple[Page, str]:
        route = derive_route(alias, route, request_url)

        page = self.find_model(alias, route, lang, draft)
        if page is None and lang is None:
            logger.debug(
                "Page %r not found at %s, retrying with default language %s",
                alias,
                route,
                self.default_lang,
            )
            page = self.find_model(alias, route, self.default_lang, draft)

        if page is None:
            logger.debug("Page %r not found at %s (lang=%s)", alias, route, lang)
            raise PageNotFound(self._not_found_message())

        # a page bound to a route is served under that route only
        if page.route is not None and page.route != route:
            logger.debug("Page %r is bound to %s, requested at %s", alias, page.route, route)
            raise PageNotFound(self._not_found_message())

        return page, route

    def find_model(
        self,
        alias: str,
        route: str | None = None,
        lang: str | None = None,
        draft: bool = False,
    ) -> Page | None:
        locale = None
        if lang is not None:
            locale = self.resolve_locale(lang)

        if not draft and lang is not None and locale is None:
            return None

        conditions = [
            Page.alias == alias,
            Page.status == (STATUS_DRAFT if draft else STATUS_PUBLISHED),
        ]
        if locale is not None:
            conditions.append(Page.locale == locale)

        route_matches = Page.route == route
        if route in self._shared_routes:
            route_matches = or_(route_matches, Page.route.is_(None))
        conditions.append(route_matches)

        stmt = (
            select(Page)
            .where(*conditions)
            .order_by(Page.route.is_(None), Page.id)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def resolve_locale(self, lang: str) -> str | None:
        """Concrete locale for a URL language code, or None if unsupported."""
        if self.translations is not None:
            return locales_by_url(self.translations.get_locales()).get(lang)
        return match_locale(lang, self.config.support_locales)

    def _not_found_message(self) -> str:
        return message("pages.not_found", self.i18n)
