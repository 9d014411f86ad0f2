from .base import CommerceBaseSettings


class LoggingSettings(CommerceBaseSettings):
    """Settings for log output. Loaded with prefix COMMERCE_LOG_*."""

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    model_config = {
        **CommerceBaseSettings.model_config,
        "env_prefix": "COMMERCE_LOG_",
    }
