"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    assetcatalog_log_level: str = "info"

    # JSON text layout; None renders compact output
    assetcatalog_json_indent: int | None = None
    assetcatalog_sort_keys: bool = False

    # Descriptor file written into every catalog directory
    assetcatalog_contents_filename: str = "Contents.json"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Route package loggers to stderr. Call once from the embedding application."""
    load_dotenv()
    name = (level or settings.assetcatalog_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
