import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pagekit.config import settings
from pagekit.i18n import pick_lang, ui_langs
from pagekit.routers import pages, site
from pagekit.ui import templates

handlers: list[logging.Handler] = [logging.StreamHandler()]
if settings.LOG_FILE:
    handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=handlers,
)
logger = logging.getLogger("pagekit")


app = FastAPI(title=settings.APP_NAME)


@app.middleware("http")
async def lang_middleware(request: Request, call_next):
    lang = pick_lang(request)
    request.state.lang = lang
    response: Response = await call_next(request)
    if request.query_params.get("lang") in ui_langs():
        response.set_cookie("lang", lang, max_age=60 * 60 * 24 * 365, samesite="lax")
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        lang = getattr(request.state, "lang", settings.SOURCE_LANGUAGE)
        return templates.TemplateResponse(
            "site/404.html",
            {"request": request, "lang": lang, "message": exc.detail},
            status_code=404,
        )
    return HTMLResponse(str(exc.detail), status_code=exc.status_code)


@app.get("/health")
def health():
    logger.info("Health check hit")
    return {"ok": True}


app.include_router(site.router)
app.include_router(pages.router)
