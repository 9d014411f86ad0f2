from .base import CommerceBaseSettings


class DatabaseSettings(CommerceBaseSettings):
    """
    Database configuration settings.

    Loaded from environment variables with prefix COMMERCE_DB_*
    (e.g. COMMERCE_DB_DATABASE_URL) or the .env file.
    """

    database_url: str = "sqlite+aiosqlite:///:memory:"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for debugging)
    echo_sql: bool = False

    model_config = {
        **CommerceBaseSettings.model_config,
        "env_prefix": "COMMERCE_DB_",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_memory(self) -> bool:
        return self.is_sqlite and (":memory:" in self.database_url or self.database_url.endswith("://"))
