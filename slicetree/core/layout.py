"""Floorplan Layout
---

A slicing tree only says how blocks are arranged relative to each other. The
layout turns that into geometry in two passes:

1. `measure` walks the tree bottom-up and gives every cut the size of the
   smallest rectangle that holds its two children.
2. `transform` walks the tree top-down from an origin and gives every block the
   absolute position of its bottom-left corner.

A horizontal cut stacks its `left` child on top of its `right` child, and a
vertical cut puts its `left` child to the left of its `right` child.
"""
from typing import Any, Dict, Optional, Tuple

from .nodes import BlockNode, SlicingNode


class FloorplanLayout:
    """Calculate the size of every region and the position of every block."""

    def layout(self, node: SlicingNode, x: int = 0, y: int = 0) -> "FloorplanMeasurement":
        """Measure the tree and then place its blocks with the root's bottom-left
        corner at `(x, y)`.

        Returns a FloorplanMeasurement object that describes the placed blocks"""
        self.measure(node)
        return self.transform(node, x, y)

    def measure(self, node: SlicingNode) -> "FloorplanLayout":
        """Assign width/height to every cut in the tree, children first."""

        def visit_fn(current: Any, depth: int, data: Any) -> None:
            current.measure()

        node.visit_postorder(visit_fn)
        return self

    def transform(
        self,
        node: SlicingNode,
        x: int = 0,
        y: int = 0,
        measure: "FloorplanMeasurement" = None,
    ) -> "FloorplanMeasurement":
        """Place every block in the tree, parents first. The tree must have been
        measured already.

        Return a measurement of the placed blocks."""
        if measure is None:
            measure = FloorplanMeasurement()
        origins: Dict[int, Tuple[int, int]] = {id(node): (x, y)}

        def visit_fn(current: Any, depth: int, data: Any) -> None:
            origin_x, origin_y = origins.pop(id(current))
            if isinstance(current, BlockNode):
                measure.add_block(current.place(origin_x, origin_y))
                return
            measure.cuts += 1
            for child, child_x, child_y in current.child_origins(origin_x, origin_y):
                origins[id(child)] = (child_x, child_y)

        node.visit_preorder(visit_fn)
        return measure


class FloorplanMeasurement:
    """Summary of the placed floorplan"""

    min_x: Optional[int]
    min_y: Optional[int]
    max_x: Optional[int]
    max_y: Optional[int]

    def __init__(self):
        self.min_x = None
        self.min_y = None
        self.max_x = None
        self.max_y = None
        self.blocks = 0
        self.cuts = 0
        self.block_area = 0

    def add_block(self, block: BlockNode) -> None:
        assert block.x is not None and block.y is not None
        right = block.x + block.width
        top = block.y + block.height
        self.min_x = block.x if self.min_x is None else min(self.min_x, block.x)
        self.min_y = block.y if self.min_y is None else min(self.min_y, block.y)
        self.max_x = right if self.max_x is None else max(self.max_x, right)
        self.max_y = top if self.max_y is None else max(self.max_y, top)
        self.blocks += 1
        self.block_area += block.area

    @property
    def width(self) -> int:
        if self.min_x is None or self.max_x is None:
            return 0
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        if self.min_y is None or self.max_y is None:
            return 0
        return self.max_y - self.min_y

    @property
    def utilization(self) -> float:
        """The share of the bounding rectangle that is covered by blocks. A
        value below 1.0 means the floorplan has dead space."""
        area = self.width * self.height
        if area == 0:
            return 0.0
        return self.block_area / area
