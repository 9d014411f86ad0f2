# commerce/settings/base.py
from pydantic_settings import BaseSettings


class CommerceBaseSettings(BaseSettings):
    """Shared .env loading for every settings section."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
