from sqlalchemy import Boolean, Column, Integer, String
from pagekit.db import Base


class Redirect(Base):
    __tablename__ = "redirects"
    id = Column(Integer, primary_key=True, index=True)
    request_url = Column(String(255), unique=True, nullable=False, index=True)
    redirect_url = Column(String(255), nullable=False)
    code = Column(Integer, nullable=False, default=301)
    is_active = Column(Boolean, nullable=False, default=True)
