"""Configuration management for linguistic example export."""

from pydantic_settings import BaseSettings

from lingex.models import EmptyItemPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Error handling
    strict: bool = False  # raise on malformed items instead of reporting

    # gb4e commands
    gb4e_item_command: str = r"\ex"
    gb4e_tagged_item_command: str = r"\exi"
    gb4e_environment: str = "exe"
    gb4e_sublist_environment: str = "xlist"

    # Unjudged items with empty text among judged siblings
    empty_item_policy: EmptyItemPolicy = EmptyItemPolicy.FILL

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "LINGEX_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
