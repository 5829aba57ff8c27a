"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    corpus_root: str = Field(
        default="docs", description="Directory holding the style-guide corpus."
    )
    frameworks_dir: str = "frameworks"
    languages_dir: str = "languages"
    frameworks_index: str = "frameworks/README.md"
    exclude_dirs: List[str] = Field(
        default_factory=lambda: [".git", "node_modules", ".venv", "_site"]
    )

    check_anchors: bool = True
    strict: bool = False

    report_path: str = "data/reports/doctrine_report.json"
    metadata_path: str = "data/parsed/doctrine_documents.jsonl"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def corpus_root_path(self) -> Path:
        return Path(self.corpus_root)

    @property
    def report_path_obj(self) -> Path:
        return Path(self.report_path)

    @property
    def metadata_path_obj(self) -> Path:
        return Path(self.metadata_path)


settings = Settings()
