from pydantic import BaseModel, Field, field_validator, model_validator
from slugify import slugify

from pagekit.models.page import STATUS_DRAFT, STATUS_PUBLISHED, Page
from pagekit.services.resolver import normalize_route


def _clean(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class PageForm(BaseModel):
    """Validated input for creating or updating a page."""

    parent_id: int | None = None
    source_id: int | None = None
    name: str = Field(min_length=3, max_length=128)
    alias: str = Field(min_length=3, max_length=128)
    content: str = Field(min_length=1)
    title: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=255)
    keywords: str | None = Field(default=None, max_length=255)
    in_sitemap: bool = False
    in_turbo: bool = False
    in_amp: bool = False
    locale: str = Field(min_length=1, max_length=10)
    status: int = STATUS_DRAFT
    route: str | None = None
    layout: str | None = Field(default=None, max_length=255)

    @model_validator(mode="before")
    @classmethod
    def fill_alias(cls, data):
        if isinstance(data, dict):
            data = {key: _clean(value) for key, value in data.items()}
            if not data.get("alias") and data.get("name"):
                data["alias"] = slugify(data["name"], max_length=128)
        return data

    @field_validator("status")
    @classmethod
    def check_status(cls, value: int) -> int:
        if value not in (STATUS_DRAFT, STATUS_PUBLISHED):
            raise ValueError("status must be draft (0) or published (1)")
        return value

    @field_validator("route")
    @classmethod
    def check_route(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_route(value)

    def apply(self, page: Page | None = None) -> Page:
        """Copy the validated fields onto ``page`` (a new one when omitted)."""
        page = page if page is not None else Page()
        for field, value in self.model_dump().items():
            setattr(page, field, value)
        return page
