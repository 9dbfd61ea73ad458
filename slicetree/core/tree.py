from typing import Any, Callable, List, Optional, Tuple

# Return this from a node visit function to abort a tree visit.
STOP = "stop"

VisitFunction = Callable[["BinaryTreeNode", int, Any], Optional[str]]


class BinaryTreeNode:
    """Base node for slicing trees. A node owns its left and right children and
    keeps no reference to its parent, so every walk goes from the root down.

    Visits use an explicit stack instead of recursion, so that a degenerate
    (list-like) tree is limited by memory rather than by the Python recursion
    limit.
    """

    left: Optional["BinaryTreeNode"]
    right: Optional["BinaryTreeNode"]

    def __init__(
        self, left: "BinaryTreeNode" = None, right: "BinaryTreeNode" = None,
    ):
        self.left = None
        self.right = None
        self.set_left(left)
        self.set_right(right)

    @property
    def name(self) -> str:
        """Human readable name for this node."""
        return "BinaryTreeNode"

    def set_left(self, child: "BinaryTreeNode" = None) -> "BinaryTreeNode":
        if child is self:
            raise ValueError("nodes cannot be their own children")
        self.left = child
        return self

    def set_right(self, child: "BinaryTreeNode" = None) -> "BinaryTreeNode":
        if child is self:
            raise ValueError("nodes cannot be their own children")
        self.right = child
        return self

    def visit_preorder(
        self, visit_fn: VisitFunction, depth: int = 0, data: Any = None
    ) -> Optional[str]:
        """Visit the current node, then its left subtree, then its right subtree.

        *Visit -> Left -> Right*

        `visit_fn` is called with the node being visited, its depth in the tree
        and the `data` argument. Returning `STOP` from it cancels the visit, and
        the visit then returns `STOP` as well.
        """
        stack: List[Tuple[BinaryTreeNode, int]] = [(self, depth)]
        while stack:
            node, level = stack.pop()
            if visit_fn(node, level, data) == STOP:
                return STOP
            # Push right first so that left is visited first
            if node.right:
                stack.append((node.right, level + 1))
            if node.left:
                stack.append((node.left, level + 1))
        return None

    def visit_postorder(
        self, visit_fn: VisitFunction, depth: int = 0, data: Any = None
    ) -> Optional[str]:
        """Visit the left subtree, then the right subtree, then the current node.

        *Left -> Right -> Visit*

        Takes the same arguments as `visit_preorder`.
        """
        # The flag marks nodes whose children have already been pushed
        stack: List[Tuple[BinaryTreeNode, int, bool]] = [(self, depth, False)]
        while stack:
            node, level, expanded = stack.pop()
            if expanded:
                if visit_fn(node, level, data) == STOP:
                    return STOP
                continue
            stack.append((node, level, True))
            if node.right:
                stack.append((node.right, level + 1, False))
            if node.left:
                stack.append((node.left, level + 1, False))
        return None
