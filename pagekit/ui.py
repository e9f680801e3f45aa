from pathlib import Path

from fastapi.templating import Jinja2Templates
from pagekit.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["settings"] = settings


def common_ctx(request, extra: dict | None = None):
    base = {
        "request": request,
        "lang": active_lang(request),
    }
    if extra:
        base.update(extra)
    return base


def active_lang(request):
    return getattr(request.state, "lang", settings.SOURCE_LANGUAGE)
