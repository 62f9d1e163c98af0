from pydantic_settings import BaseSettings, SettingsConfigDict

from app.utils.pagination import PaginationConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    POSTGRES_DB: str
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int = 5432
    DATABASE_URL: str | None = None

    REPOSITORY_SKIP_PAGINATION: bool = True
    REPOSITORY_PAGINATION_LIMIT: int = 15
    REPOSITORY_LIMIT_PAGINATION: int = 100

    GUARD_NAME: str = "api"

    LOG_LEVEL: str = "INFO"

    @property
    def db_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def pagination(self) -> PaginationConfig:
        return PaginationConfig(
            skip_pagination_enabled=self.REPOSITORY_SKIP_PAGINATION,
            default_limit=self.REPOSITORY_PAGINATION_LIMIT,
            max_limit=self.REPOSITORY_LIMIT_PAGINATION,
        )


settings = Settings()
