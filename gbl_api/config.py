"""All settings, loaded from the environment and the .env file."""
from functools import lru_cache

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    # App
    app_name: str = "GBL Fishing API"
    host: str = "0.0.0.0"
    port: int = 3000

    # Database (DATABASE_URL wins over the DB_* parts when set)
    database_url: str = ""
    db_driver: str = "mysql+pymysql"
    db_host: str = "localhost"
    db_user: str = ""
    db_password: str = ""
    db_name: str = ""
    db_port: int = 3306

    # Pool
    db_pool_size: int = 10
    db_pool_timeout: int = 70
    db_connect_timeout: int = 70

    # Behavior
    list_per_page: int = 30
    auto_create_tables: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        url = URL.create(
            self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host or None,
            port=self.db_port,
            database=self.db_name or None,
        )
        return url.render_as_string(hide_password=False)

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
