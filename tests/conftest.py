import os
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from pagekit.config import PagesConfig, settings
from pagekit.db import Base, get_db
from pagekit.main import app
from pagekit.services.resolver import PageResolver
import pagekit.models  # noqa: F401

settings.BASE_URL = "http://test"
settings.PAGES.support_locales = ["en-US", "ru-RU"]


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def config():
    return PagesConfig(
        base_layout="layouts/main.html",
        base_route="/pages",
        support_locales=["en-US", "ru-RU"],
    )


@pytest.fixture
def resolver(db, config):
    return PageResolver(db, config, "en")


@pytest.fixture(autouse=True)
def clean_app_state():
    yield
    app.dependency_overrides.clear()
    if hasattr(app.state, "translations"):
        del app.state.translations


@asynccontextmanager
async def site_client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
