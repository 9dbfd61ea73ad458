"""Text dumps of a slicing tree, one record per line."""
from typing import Any, List

from .nodes import BlockNode, SlicingNode


def to_structure_lines(root: SlicingNode) -> List[str]:
    """Preorder dump of the tree shape. Blocks print their own size and cuts
    print only their marker, so this can be called before the tree is measured."""
    lines: List[str] = []

    def visit_fn(node: Any, depth: int, data: Any) -> None:
        lines.append(node.structure_text())

    root.visit_preorder(visit_fn)
    return lines


def to_dimension_lines(root: SlicingNode) -> List[str]:
    """Postorder dump of every node's size. Raises ValueError if the tree has not
    been measured."""
    lines: List[str] = []

    def visit_fn(node: Any, depth: int, data: Any) -> None:
        lines.append(node.dimension_text())

    root.visit_postorder(visit_fn)
    return lines


def to_placement_lines(root: SlicingNode) -> List[str]:
    """Preorder dump of every block's size and position. Cuts are skipped.
    Raises ValueError if a block has not been placed."""
    lines: List[str] = []

    def visit_fn(node: Any, depth: int, data: Any) -> None:
        if isinstance(node, BlockNode):
            lines.append(node.placement_text())

    root.visit_preorder(visit_fn)
    return lines


def to_postorder_lines(root: SlicingNode) -> List[str]:
    """Write the tree back out in the postorder input format"""
    lines: List[str] = []

    def visit_fn(node: Any, depth: int, data: Any) -> None:
        lines.append(node.postorder_text())

    root.visit_postorder(visit_fn)
    return lines
