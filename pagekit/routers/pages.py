from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from pagekit.deps import get_resolver
from pagekit.services.resolver import PageResolver

router = APIRouter(tags=["pages"])


@router.get("/{alias}", response_class=HTMLResponse)
async def view(
    alias: str,
    request: Request,
    lang: str | None = None,
    draft: bool = False,
    resolver: PageResolver = Depends(get_resolver),
):
    return resolver.view(request, alias, lang=lang, draft=draft)


@router.get("/{route:path}/{alias}", response_class=HTMLResponse)
async def view_under_route(
    route: str,
    alias: str,
    request: Request,
    lang: str | None = None,
    draft: bool = False,
    resolver: PageResolver = Depends(get_resolver),
):
    return resolver.view(request, alias, route=route, lang=lang, draft=draft)
