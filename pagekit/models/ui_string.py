from sqlalchemy import Column, Integer, String, UniqueConstraint
from pagekit.db import Base


class UIString(Base):
    """Per-language override of a page message such as ``pages.not_found``."""

    __tablename__ = "ui_string"
    id = Column(Integer, primary_key=True)
    key = Column(String(100), nullable=False, index=True)
    lang = Column(String(10), nullable=False)
    value = Column(String(255), nullable=False)
    __table_args__ = (UniqueConstraint("key", "lang", name="uq_ui_string_key_lang"),)
