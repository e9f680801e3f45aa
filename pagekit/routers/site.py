from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy import select
from sqlalchemy.orm import Session

from pagekit.config import settings
from pagekit.db import get_db
from pagekit.models.page import STATUS_PUBLISHED, Page

router = APIRouter()


@router.get("/sitemap.xml", response_class=PlainTextResponse)
async def sitemap(request: Request, db: Session = Depends(get_db)):
    pages = (
        db.execute(
            select(Page)
            .where(Page.status == STATUS_PUBLISHED, Page.in_sitemap == True)
            .order_by(Page.id)
        )
        .scalars()
        .all()
    )
    base = settings.BASE_URL.rstrip("/")
    locs = [f"{base}/"]
    for p in pages:
        loc = p.url(base, settings.SOURCE_LANGUAGE)
        if loc not in locs:
            locs.append(loc)
    urls = [f"<url><loc>{loc}</loc></url>" for loc in locs]
    body = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "\n".join(urls)
        + "\n</urlset>"
    )
    return PlainTextResponse(body, media_type="application/xml")
