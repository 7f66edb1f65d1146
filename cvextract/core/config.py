"""
Runtime settings for the extraction pipeline.

Every tunable heuristic threshold lives here instead of inline in the parsers.
Values were tuned on a small sample of CVs; override them through environment
variables (prefix CVEXTRACT_) or a local .env file rather than editing code.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CVEXTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "CV Extract"
    log_level: str = "INFO"

    # NER
    spacy_model: str = "en_core_web_sm"
    nlp_max_chars: int = 100_000

    # Name resolution
    name_min_length: int = 3  # exclusive
    name_max_length: int = 100  # exclusive
    name_scan_lines: int = 10
    name_min_words: int = 2
    name_max_words: int = 6

    # PDF spacing-artifact repair ("S an ge eth Per era")
    spacing_artifact_token_length: int = 4
    spacing_artifact_ratio: float = 0.5
    spacing_artifact_min_tokens: int = 4

    # Line-length noise thresholds
    education_line_max_length: int = 150
    company_line_max_length: int = 100

    # Contact
    phone_regions: List[str] = Field(default_factory=lambda: ["LK", "GB", "US", "IN", "AU"])
    default_url_scheme: str = "https"


@lru_cache
def get_settings() -> Settings:
    return Settings()
