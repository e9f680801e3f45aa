from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PagesConfig(BaseModel):
    """Options of the pages module, handed to the resolver explicitly."""

    base_layout: str = "layouts/main.html"
    base_route: str = "/pages"
    support_locales: list[str] = Field(default_factory=lambda: ["en-US"])


class Settings(BaseSettings):
    APP_NAME: str = "Pages"
    SECRET_KEY: str = "change-me"
    DATABASE_URL: str = "sqlite:///./pages.db"
    SOURCE_LANGUAGE: str = "en"
    BASE_URL: str = "http://localhost:8000"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""
    PAGES: PagesConfig = Field(default_factory=PagesConfig)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )


settings = Settings()
