from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
    or_,
    select,
)
from sqlalchemy.orm import Session, aliased, relationship

from pagekit.db import Base
from pagekit.services.i18n_db import message
from pagekit.services.locales import primary_language

STATUS_DRAFT = 0
STATUS_PUBLISHED = 1


class Page(Base):
    """A content page, one row per locale and status variant."""

    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, index=True)
    parent_id = Column(
        Integer, ForeignKey("pages.id", ondelete="SET NULL"), nullable=True, index=True
    )
    source_id = Column(
        Integer, ForeignKey("pages.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name = Column(String(128), nullable=False)
    alias = Column(String(128), nullable=False, index=True)
    content = Column(Text, nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(String(255), nullable=True)
    keywords = Column(String(255), nullable=True)
    in_sitemap = Column(Boolean, nullable=False, default=False)
    in_turbo = Column(Boolean, nullable=False, default=False)
    in_amp = Column(Boolean, nullable=False, default=False)
    locale = Column(String(10), nullable=False, index=True)
    status = Column(Integer, nullable=False, default=STATUS_DRAFT, index=True)
    route = Column(String(255), nullable=True)
    layout = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    created_by = Column(Integer, nullable=True)
    updated_at = Column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )
    updated_by = Column(Integer, nullable=True)

    # NULL routes compare equal here, unlike in a plain unique constraint
    __table_args__ = (
        Index(
            "uq_pages_alias_route_status_locale",
            alias,
            func.coalesce(route, ""),
            status,
            locale,
            unique=True,
        ),
    )

    parent = relationship(
        "Page", remote_side=[id], foreign_keys=[parent_id], backref="children"
    )
    source = relationship(
        "Page", remote_side=[id], foreign_keys=[source_id], backref="translations"
    )

    @property
    def is_published(self) -> bool:
        return self.status == STATUS_PUBLISHED

    def url(self, base_url: str | None = None, source_language: str | None = None) -> str:
        """Public URL of the page.

        With ``source_language`` given, variants in any other language get a
        ``?lang=`` marker so every locale has its own address.
        """
        prefix = (self.route or "").rstrip("/")
        path = f"{prefix}/{self.alias}"
        lang = primary_language(self.locale)
        if source_language and lang and lang != primary_language(source_language):
            path += f"?lang={lang}"
        if base_url:
            return base_url.rstrip("/") + path
        return path

    @staticmethod
    def statuses_list(all_statuses: bool = False, i18n=None) -> dict:
        items = {}
        if all_statuses:
            items["*"] = message("pages.status.all", i18n)
        items[STATUS_DRAFT] = message("pages.status.draft", i18n)
        items[STATUS_PUBLISHED] = message("pages.status.published", i18n)
        return items

    def parents_list(
        self,
        db: Session,
        all_label: bool = True,
        root_label: bool = False,
        i18n=None,
    ) -> dict:
        """Pages that may become the parent of this one, as ``{id: name}``.

        The page itself and pages hanging under its children are left out.
        This only shapes the choices offered to an editor, nothing stops a
        cycle from being stored.
        """
        if self.id:
            candidate = aliased(Page, name="candidate")
            children = select(Page.id).where(Page.parent_id == self.id)
            stmt = (
                select(candidate.id, candidate.name)
                .where(
                    or_(
                        candidate.parent_id.not_in(children)
                        & (candidate.parent_id != self.id),
                        candidate.parent_id.is_(None),
                    ),
                    candidate.id != self.id,
                )
                .order_by(candidate.id)
            )
        else:
            stmt = select(Page.id, Page.name).order_by(Page.id)

        pages = {row.id: row.name for row in db.execute(stmt)}

        if all_label:
            return {"*": message("pages.parents.all", i18n), **pages}
        if root_label:
            return {0: message("pages.parents.root", i18n), **pages}
        return pages

    def __repr__(self) -> str:
        return f"<Page id={self.id} alias={self.alias!r} locale={self.locale!r}>"
