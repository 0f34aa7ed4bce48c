"""
Decision Tree Classifier for the Loan Triage Engine.

A fixed binary tree of credit score thresholds. Traversal starts at the
root and moves left for scores below a node's threshold and right
otherwise. Falling off the left side rejects, falling off the right side
approves, and an absent root leaves the applicant undecided.

Reference configuration:

                600
              /     \\
           500       700
           /        /   \\
         450      650    750
"""

from typing import Any, Optional

from src.domain.exceptions import InvalidDecisionTreeException

from .models import DecisionTreeNode, Prediction
from .tree_config import check_tree_node


def build_decision_tree(
    config: Optional[Any],
    max_depth: Optional[int] = None,
    _depth: int = 1,
) -> Optional[DecisionTreeNode]:
    """
    Build a decision tree from a nested configuration mapping.

    Args:
        config: {"threshold": int, "left": config|None, "right": config|None},
            or None for an absent tree
        max_depth: Optional limit on the number of levels

    Returns:
        Root node of a newly built tree, or None

    Raises:
        InvalidDecisionTreeException: If a node is not a mapping, carries
            unknown keys, has no integer threshold, or the tree is too deep
    """
    if config is None:
        return None

    threshold = check_tree_node(config, max_depth, _depth)

    return DecisionTreeNode(
        threshold=threshold,
        left=build_decision_tree(config.get("left"), max_depth, _depth + 1),
        right=build_decision_tree(config.get("right"), max_depth, _depth + 1),
    )


def validate_decision_tree(root: Optional[DecisionTreeNode]) -> None:
    """
    Check that a tree is strictly tree-shaped.

    Raises:
        InvalidDecisionTreeException: If any node is reachable twice
            (a cycle or a shared subtree)
    """
    seen = set()
    stack = [root] if root is not None else []

    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise InvalidDecisionTreeException(
                f"Node with threshold {node.threshold} is reachable more than once"
            )
        seen.add(id(node))
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)


def classify(node: Optional[DecisionTreeNode], credit_score: int) -> Prediction:
    """
    Classify a credit score by walking the tree.

    Args:
        node: Tree root (None yields Undecided)
        credit_score: Applicant credit score

    Returns:
        Prediction.APPROVED, Prediction.REJECTED or Prediction.UNDECIDED
    """
    if node is None:
        return Prediction.UNDECIDED

    while True:
        if credit_score < node.threshold:
            if node.left is None:
                return Prediction.REJECTED
            node = node.left
        else:
            if node.right is None:
                return Prediction.APPROVED
            node = node.right


def tree_depth(node: Optional[DecisionTreeNode]) -> int:
    """Number of levels in the tree (0 for an absent tree)."""
    if node is None:
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))
