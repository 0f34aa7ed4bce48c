"""
Decision Engine for the Loan Triage Engine.

This module orchestrates the complete decision-making process:
1. Validate the decision tree
2. Queue applicants by ascending risk score
3. Train (once) and freeze the Naive Bayes model on the batch
4. Drain the queue, classifying each applicant with both models
5. Combine both predictions into a final verdict

This is the main entry point for the scoring module.
"""

from typing import Iterable, List, Optional

import structlog

from .decision_tree import classify, validate_decision_tree
from .models import (
    Applicant,
    ApplicantVerdict,
    DecisionTreeNode,
    FinalDecision,
    Prediction,
)
from .naive_bayes import ModelState, NaiveBayesClassifier
from .priority_queue import ApplicantQueue
from .settings import ScoringSettings, scoring_settings

logger = structlog.get_logger(__name__)


def combine_decisions(tree_result: Prediction, bayes_result: Prediction) -> FinalDecision:
    """
    Merge both classifier outputs into a final decision.

    Approval requires both classifiers to approve; Undecided counts
    as not approved.
    """
    if tree_result == Prediction.APPROVED and bayes_result == Prediction.APPROVED:
        return FinalDecision.APPROVED
    return FinalDecision.REJECTED


def evaluate_applicant(
    applicant: Applicant,
    tree: Optional[DecisionTreeNode],
    classifier: NaiveBayesClassifier,
) -> ApplicantVerdict:
    """Run one applicant through both classifiers and the combiner."""
    tree_result = classify(tree, applicant.credit_score)
    bayes_result = classifier.predict(applicant)

    return ApplicantVerdict(
        name=applicant.name,
        credit_score=applicant.credit_score,
        dti=applicant.dti,
        risk_score=applicant.risk_score,
        tree_result=tree_result,
        bayes_result=bayes_result,
        final_decision=combine_decisions(tree_result, bayes_result),
    )


def process_applicants(
    applicants: Iterable[Applicant],
    tree: Optional[DecisionTreeNode],
    classifier: Optional[NaiveBayesClassifier] = None,
    settings: ScoringSettings = scoring_settings,
) -> List[ApplicantVerdict]:
    """
    Produce one verdict per applicant, lowest risk first.

    Model handling:
        - No classifier: a new one is trained on the batch
        - Untrained classifier: trained on the batch
        - Trained or frozen classifier: used as-is
    In every case the classifier is frozen before any prediction.

    Args:
        applicants: The batch to evaluate
        tree: Decision tree root (None classifies everyone as Undecided)
        classifier: Optional caller-owned Naive Bayes model
        settings: Scoring settings used for a newly created classifier

    Returns:
        Verdicts in ascending risk order

    Raises:
        InvalidDecisionTreeException: If the tree is not strictly tree-shaped
    """
    applicants = list(applicants)
    validate_decision_tree(tree)

    queue = ApplicantQueue(applicants)

    if classifier is None:
        classifier = NaiveBayesClassifier(settings)
    if classifier.state == ModelState.UNTRAINED:
        classifier.train(applicants)
    classifier.freeze()

    verdicts = []
    for applicant in queue.drain():
        verdict = evaluate_applicant(applicant, tree, classifier)
        logger.debug(
            "applicant_scored",
            applicant=verdict.name,
            risk_score=round(verdict.risk_score, 4),
            tree_result=verdict.tree_result.value,
            bayes_result=verdict.bayes_result.value,
            final_decision=verdict.final_decision.value,
        )
        verdicts.append(verdict)

    return verdicts


def explain_verdict(verdict: ApplicantVerdict) -> str:
    """
    Generate a human-readable report of a verdict.

    Args:
        verdict: The verdict to explain

    Returns:
        Multi-line report string
    """
    lines = [
        f"Applicant: {verdict.name}",
        f"Credit Score: {verdict.credit_score}",
        f"Debt-to-Income Ratio: {verdict.dti:.2f}",
        f"Risk Score: {verdict.risk_score:.2f}",
        f"Decision Tree Prediction: {verdict.tree_result.value}",
        f"Naive Bayes Prediction: {verdict.bayes_result.value}",
        f"Final Decision: {verdict.final_decision.value}",
    ]
    return "\n".join(lines)
