"""Centralized configuration for the text analysis pipeline."""

import json
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textdtm.models import TokenizationPolicy


class TokenizerConfig(BaseSettings):
    """Tokenization policy parameters."""

    model_config = SettingsConfigDict(env_prefix="TOKENIZER_", frozen=True)

    policy: Literal[
        "whitespace", "regex", "word", "ngram", "character", "character_shingle"
    ] = "word"
    n: int = Field(default=1, gt=0)
    n_min: int = Field(default=1, gt=0)
    pattern: str = r"\s+"

    @model_validator(mode="after")
    def _n_min_not_above_n(self) -> "TokenizerConfig":
        if self.n_min > self.n:
            msg = f"n_min ({self.n_min}) must not exceed n ({self.n})"
            raise ValueError(msg)
        return self

    def to_policy(self) -> TokenizationPolicy:
        """Build the ``TokenizationPolicy`` these settings describe."""
        return TokenizationPolicy(
            kind=self.policy, n=self.n, n_min=self.n_min, pattern=self.pattern
        )


class WeightingConfig(BaseSettings):
    """Term weighting settings."""

    model_config = SettingsConfigDict(env_prefix="WEIGHTING_", frozen=True)

    # Which matrix feeds the "tf" side of TF-IDF.
    tf: Literal["count", "relative"] = "count"
    empty_documents: Literal["raise", "nan"] = "raise"


class ReportConfig(BaseSettings):
    """Ranking/report settings."""

    model_config = SettingsConfigDict(env_prefix="REPORT_", frozen=True)

    top_n: int = Field(default=10, gt=0)


class PipelineConfig(BaseSettings):
    """Top-level pipeline configuration."""

    model_config = SettingsConfigDict(env_prefix="PIPELINE_", frozen=True)

    lowercase: bool = False
    stopwords: list[str] = Field(default_factory=list)
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    weighting: WeightingConfig = Field(default_factory=WeightingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @field_validator("stopwords", mode="before")
    @classmethod
    def _parse_stopwords(cls, v: object) -> list[str]:
        """Accept a JSON array string or comma-separated string from env vars."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except (json.JSONDecodeError, ValueError):
                parsed = [item.strip() for item in v.split(",") if item.strip()]
            if not isinstance(parsed, list):
                return [str(parsed)]
            return [str(item) for item in parsed]
        return v  # type: ignore[return-value]
