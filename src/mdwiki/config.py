"""Library configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MARKDOWN_EXTENSIONS = [
    "extra",
    "sane_lists",
    "smarty",
    "toc",
    "pymdownx.tasklist",
]


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    data_dir: Path = Path("data/pages")
    encoding: str = "utf-8"
    markdown_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS)
    )

    model_config = SettingsConfigDict(
        env_prefix="MDWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
