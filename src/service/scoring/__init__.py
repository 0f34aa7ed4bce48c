"""
Scoring Module for the Loan Triage Engine
"""

from .models import (
    Applicant,
    ApplicantVerdict,
    DecisionTreeNode,
    FinalDecision,
    Prediction,
)
from .settings import ScoringSettings, scoring_settings
from .risk_score import calculate_dti, calculate_risk_score
from .priority_queue import ApplicantQueue
from .decision_tree import (
    build_decision_tree,
    classify,
    tree_depth,
    validate_decision_tree,
)
from .naive_bayes import BucketCounts, ModelState, NaiveBayesClassifier
from .decision import (
    combine_decisions,
    evaluate_applicant,
    explain_verdict,
    process_applicants,
)
from .sample_data import reference_applicants

__all__ = [
    # Settings
    "ScoringSettings",
    "scoring_settings",
    # Models
    "Applicant",
    "ApplicantVerdict",
    "DecisionTreeNode",
    "FinalDecision",
    "Prediction",
    # Risk Score
    "calculate_dti",
    "calculate_risk_score",
    # Priority Queue
    "ApplicantQueue",
    # Decision Tree
    "build_decision_tree",
    "classify",
    "tree_depth",
    "validate_decision_tree",
    # Naive Bayes
    "BucketCounts",
    "ModelState",
    "NaiveBayesClassifier",
    # Decision
    "combine_decisions",
    "evaluate_applicant",
    "explain_verdict",
    "process_applicants",
    # Sample Data
    "reference_applicants",
]
