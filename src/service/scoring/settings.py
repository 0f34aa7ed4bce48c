"""
Scoring Settings for the Loan Triage Engine.

This module contains all configurable parameters for the scoring pipeline:
the risk score formula, the Naive Bayes bucketing and cut-off, and the
decision tree thresholds.

Environment variables use the SCORING_ prefix:
    SCORING_BUCKET_THRESHOLD=600
    SCORING_DEFAULTS_WEIGHT=0.5
    SCORING_DECISION_TREE_JSON='{"threshold": 600, "left": null, "right": null}'

Usage:
    from src.service.scoring.settings import scoring_settings

    # Use default settings (loaded from env)
    tree = scoring_settings.decision_tree

    # Or create custom settings for testing
    custom = ScoringSettings(bucket_threshold=650)
"""

import json
from functools import lru_cache
from typing import Optional, TYPE_CHECKING

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.exceptions import InvalidDecisionTreeException

from .tree_config import check_tree_config

if TYPE_CHECKING:
    from .models import DecisionTreeNode


REFERENCE_DECISION_TREE = {
    "threshold": 600,
    "left": {
        "threshold": 500,
        "left": {"threshold": 450, "left": None, "right": None},
        "right": None,
    },
    "right": {
        "threshold": 700,
        "left": {"threshold": 650, "left": None, "right": None},
        "right": {"threshold": 750, "left": None, "right": None},
    },
}


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for the scoring pipeline.

    All settings can be overridden via environment variables with SCORING_ prefix.
    Values are read once; there is no API for changing them afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Risk Score ===
    infinite_dti: float = Field(
        default=1e9,
        gt=0.0,
        description="DTI assigned when income is zero or negative (unaffordable)",
    )
    defaults_weight: float = Field(
        default=0.5,
        ge=0.0,
        description="Risk score points added per prior default",
    )

    # === Naive Bayes ===
    bucket_threshold: int = Field(
        default=600,
        description="Credit score at or above this falls into bucket 1",
    )
    smoothing: int = Field(
        default=1,
        ge=0,
        description="Added to the approval probability denominator",
    )
    approval_probability: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Approval probability must exceed this to predict Approved",
    )

    # === Decision Tree ===
    max_tree_depth: int = Field(
        default=32,
        ge=1,
        description="Maximum number of levels accepted in the tree configuration",
    )
    decision_tree_json: str = Field(
        default=json.dumps(REFERENCE_DECISION_TREE),
        description=(
            'Decision tree as nested JSON: {"threshold": int, "left": node|null, '
            '"right": node|null}; null disables the tree'
        ),
    )

    @field_validator("decision_tree_json")
    @classmethod
    def validate_tree_json(cls, v: str) -> str:
        """Validate that the tree JSON is parseable."""
        try:
            json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        return v

    @model_validator(mode="after")
    def validate_tree_shape(self) -> "ScoringSettings":
        """Validate the tree structure against max_tree_depth."""
        try:
            check_tree_config(self.decision_tree_config, self.max_tree_depth)
        except InvalidDecisionTreeException as e:
            raise ValueError(e.message)
        return self

    @property
    def decision_tree_config(self) -> Optional[dict]:
        """Parsed decision tree configuration (None for an absent tree)."""
        return json.loads(self.decision_tree_json)

    @property
    def decision_tree(self) -> Optional["DecisionTreeNode"]:
        """A freshly built decision tree owned by the caller."""
        from .decision_tree import build_decision_tree

        return build_decision_tree(self.decision_tree_config, self.max_tree_depth)


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
