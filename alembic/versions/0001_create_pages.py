"""create pages, redirects and ui_string tables

Revision ID: 0001_create_pages
Revises:
Create Date: 2026-10-19 00:00:00

"""

from alembic import op
import sqlalchemy as sa


def _has_table(name: str) -> bool:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    return name in inspector.get_table_names()


revision = "0001_create_pages"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    if not _has_table("pages"):
        op.create_table(
            "pages",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("parent_id", sa.Integer(), nullable=True),
            sa.Column("source_id", sa.Integer(), nullable=True),
            sa.Column("name", sa.String(length=128), nullable=False),
            sa.Column("alias", sa.String(length=128), nullable=False),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=True),
            sa.Column("description", sa.String(length=255), nullable=True),
            sa.Column("keywords", sa.String(length=255), nullable=True),
            sa.Column("in_sitemap", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("in_turbo", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("in_amp", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("locale", sa.String(length=10), nullable=False),
            sa.Column("status", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("route", sa.String(length=255), nullable=True),
            sa.Column("layout", sa.String(length=255), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column("created_by", sa.Integer(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column("updated_by", sa.Integer(), nullable=True),
            sa.ForeignKeyConstraint(["parent_id"], ["pages.id"], ondelete="SET NULL"),
            sa.ForeignKeyConstraint(["source_id"], ["pages.id"], ondelete="SET NULL"),
        )
        # coalesce makes rows without a route collide like any other duplicate
        op.create_index(
            "uq_pages_alias_route_status_locale",
            "pages",
            ["alias", sa.text("coalesce(route, '')"), "status", "locale"],
            unique=True,
        )
        op.create_index("ix_pages_alias", "pages", ["alias"])
        op.create_index("ix_pages_locale", "pages", ["locale"])
        op.create_index("ix_pages_status", "pages", ["status"])
        op.create_index("ix_pages_parent_id", "pages", ["parent_id"])
        op.create_index("ix_pages_source_id", "pages", ["source_id"])

    if not _has_table("redirects"):
        op.create_table(
            "redirects",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("request_url", sa.String(length=255), nullable=False),
            sa.Column("redirect_url", sa.String(length=255), nullable=False),
            sa.Column("code", sa.Integer(), nullable=False, server_default="301"),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        )
        op.create_index("ix_redirects_request_url", "redirects", ["request_url"], unique=True)

    if not _has_table("ui_string"):
        op.create_table(
            "ui_string",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("key", sa.String(length=100), nullable=False),
            sa.Column("lang", sa.String(length=10), nullable=False),
            sa.Column("value", sa.String(length=255), nullable=False),
            sa.UniqueConstraint("key", "lang", name="uq_ui_string_key_lang"),
        )
        op.create_index("ix_ui_string_key", "ui_string", ["key"])


def downgrade() -> None:
    for table in ("ui_string", "redirects", "pages"):
        if _has_table(table):
            op.drop_table(table)
