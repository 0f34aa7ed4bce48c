"""Shape checks for nested decision tree configuration."""

from typing import Any, Optional

from src.domain.exceptions import InvalidDecisionTreeException

TREE_NODE_KEYS = frozenset({"threshold", "left", "right"})


def check_tree_node(config: Any, max_depth: Optional[int] = None, depth: int = 1) -> int:
    """
    Check a single configuration node (children are not visited).

    Args:
        config: A non-None node mapping
        max_depth: Optional limit on the number of levels
        depth: Level of this node, 1 for the root

    Returns:
        The node's threshold

    Raises:
        InvalidDecisionTreeException: If the node is not a mapping, carries
            unknown keys, has no integer threshold, or sits too deep
    """
    if max_depth is not None and depth > max_depth:
        raise InvalidDecisionTreeException(f"Decision tree deeper than {max_depth} levels")
    if not isinstance(config, dict):
        raise InvalidDecisionTreeException(
            f"Each tree node must be an object, got {type(config).__name__}"
        )
    unknown = set(config) - TREE_NODE_KEYS
    if unknown:
        raise InvalidDecisionTreeException(f"Unknown tree node keys: {sorted(unknown)}")

    threshold = config.get("threshold")
    # bool is an int subclass
    if not isinstance(threshold, int) or isinstance(threshold, bool):
        raise InvalidDecisionTreeException(
            f"Tree threshold must be an integer, got {threshold!r}"
        )
    return threshold


def check_tree_config(config: Any, max_depth: Optional[int] = None, depth: int = 1) -> None:
    """Check every node of a configuration; None is an absent tree."""
    if config is None:
        return
    check_tree_node(config, max_depth, depth)
    check_tree_config(config.get("left"), max_depth, depth + 1)
    check_tree_config(config.get("right"), max_depth, depth + 1)
