from unittest.mock import call, patch

import pytest

from pagekit.errors import NOT_FOUND_MESSAGE, PageNotFound
from pagekit.models.page import STATUS_DRAFT
from pagekit.models.ui_string import UIString
from pagekit.services.i18n_db import DBI18n
from pagekit.services.resolver import PageResolver
from pagekit.services.translations import StaticTranslations
from tests.helpers import make_page


def test_published_page_without_route_resolves_at_root(db, resolver):
    page = make_page(db, "about")

    found, route = resolver.resolve("about", request_url="/about")

    assert found.id == page.id
    assert route == "/"


def test_page_with_route_resolves_under_that_route(db, resolver):
    page = make_page(db, "post", route="/blog")

    found, route = resolver.resolve("post", request_url="/blog/post")

    assert found.id == page.id
    assert route == "/blog"


def test_page_with_route_is_not_found_under_other_route(db, resolver):
    make_page(db, "post", route="/blog")

    with pytest.raises(PageNotFound) as exc:
        resolver.resolve("post", request_url="/news/post")

    assert exc.value.status_code == 404
    assert exc.value.detail == NOT_FOUND_MESSAGE


def test_stored_route_must_match_computed_route(db, resolver):
    page = make_page(db, "post", route="/blog")

    with patch.object(resolver, "find_model", return_value=page):
        with pytest.raises(PageNotFound):
            resolver.resolve("post", request_url="/news/post")


def test_page_without_route_is_served_under_base_route(db, resolver):
    page = make_page(db, "about")

    found, route = resolver.resolve("about", request_url="/pages/about")

    assert found.id == page.id
    assert route == "/pages"


def test_page_without_route_is_not_served_under_arbitrary_route(db, resolver):
    make_page(db, "about")

    with pytest.raises(PageNotFound):
        resolver.resolve("about", request_url="/shop/about")


def test_exact_route_wins_over_page_without_route(db, resolver):
    make_page(db, "contacts")
    routed = make_page(db, "contacts", route="/pages", name="Routed contacts")

    found, _ = resolver.resolve("contacts", request_url="/pages/contacts")

    assert found.id == routed.id


def test_unknown_alias_is_not_found(db, resolver):
    make_page(db, "about")

    with pytest.raises(PageNotFound):
        resolver.resolve("missing", request_url="/missing")


def test_draft_is_hidden_from_public_view(db, resolver):
    make_page(db, "preview", status=STATUS_DRAFT)

    with pytest.raises(PageNotFound):
        resolver.resolve("preview", request_url="/preview")

    found, _ = resolver.resolve("preview", draft=True, request_url="/preview")
    assert found.status == STATUS_DRAFT


def test_unsupported_language_finds_nothing(db, resolver):
    make_page(db, "about")

    assert resolver.find_model("about", "/", "fr") is None


def test_language_code_selects_locale_variant(db, resolver):
    en = make_page(db, "about", locale="en-US")
    ru = make_page(db, "about", locale="ru-RU", source_id=en.id)

    assert resolver.find_model("about", "/", "ru").id == ru.id
    assert resolver.find_model("about", "/", "en").id == en.id


def test_full_locale_is_accepted_as_language(db, resolver):
    ru = make_page(db, "about", locale="ru-RU")

    assert resolver.find_model("about", "/", "ru-RU").id == ru.id


def test_draft_lookup_ignores_unsupported_language(db, resolver):
    draft = make_page(db, "about", status=STATUS_DRAFT)
    make_page(db, "about")

    found = resolver.find_model("about", "/", "fr", draft=True)

    assert found.id == draft.id


def test_missing_page_retries_with_default_language(db, resolver):
    page = make_page(db, "about")

    with patch.object(resolver, "find_model", side_effect=[None, page]) as find:
        found, route = resolver.resolve("about", request_url="/about")

    assert found is page
    assert find.call_args_list == [
        call("about", "/", None, False),
        call("about", "/", "en", False),
    ]


def test_explicit_language_is_not_retried(db, resolver):
    with patch.object(resolver, "find_model", return_value=None) as find:
        with pytest.raises(PageNotFound):
            resolver.resolve("about", lang="ru", request_url="/about")

    assert find.call_count == 1


def test_no_support_locales_degrades_to_not_found(db, config):
    make_page(db, "about")
    config.support_locales = []
    resolver = PageResolver(db, config, "en")

    assert resolver.find_model("about", "/", "en") is None
    with pytest.raises(PageNotFound):
        resolver.resolve("about", lang="en", request_url="/about")


def test_translations_map_language_codes(db, config):
    de = make_page(db, "about", locale="de-DE")
    translations = StaticTranslations(
        [{"url": "de", "locale": "de-DE"}], default_lang="de"
    )
    resolver = PageResolver(db, config, "en", translations=translations)

    assert resolver.find_model("about", "/", "de").id == de.id
    # configured locales are not consulted once translations are present
    assert resolver.find_model("about", "/", "en") is None


def test_default_language_comes_from_translations_when_hidden(db, config):
    translations = StaticTranslations(
        [{"url": "ru", "locale": "ru-RU"}], default_lang="ru", hide_default_lang=True
    )

    assert PageResolver(db, config, "en", translations=translations).default_lang == "ru"
    assert PageResolver(db, config, "en").default_lang == "en"


def test_not_found_message_is_localized(db, config):
    db.add(UIString(key="pages.not_found", lang="ru", value="Страница не найдена."))
    db.commit()
    resolver = PageResolver(db, config, "en", i18n=DBI18n(db, "ru"))

    with pytest.raises(PageNotFound) as exc:
        resolver.resolve("missing", request_url="/missing")

    assert exc.value.detail == "Страница не найдена."
