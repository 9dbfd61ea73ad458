from typing import Dict, List, Optional, Tuple, Type

from .tree import BinaryTreeNode

# Cut markers, as they appear in the input and in the dumps
HORIZONTAL = "H"
VERTICAL = "V"


class SlicingNode(BinaryTreeNode):
    """Slicing tree node. Every node has a size, leaves are given theirs at
    construction and cuts have theirs computed by `measure`."""

    left: Optional["SlicingNode"]
    right: Optional["SlicingNode"]

    @property
    def width(self) -> int:
        raise NotImplementedError(self.name)

    @property
    def height(self) -> int:
        raise NotImplementedError(self.name)

    def is_measured(self) -> bool:
        """Are this node's dimensions known?"""
        return True

    def measure(self) -> "SlicingNode":
        """Compute this node's dimensions from its children. Children must
        already be measured."""
        return self

    def child_origins(self, x: int, y: int) -> List[Tuple["SlicingNode", int, int]]:
        """Return the bottom-left origin of each child when this node is placed
        at `(x, y)`"""
        return []

    def structure_text(self) -> str:
        """The record for this node in the preorder structure dump"""
        raise NotImplementedError(self.name)

    def dimension_text(self) -> str:
        """The record for this node in the postorder dimension dump"""
        raise NotImplementedError(self.name)

    def postorder_text(self) -> str:
        """The input line that produces this node"""
        return self.structure_text()

    def __str__(self):
        return self.structure_text()

    def __repr__(self):
        return f"<{self.name}:{self.structure_text()}>"


class BlockNode(SlicingNode):
    """A physical block. Its size is fixed and it is the only kind of node that
    is given a position."""

    x: Optional[int]
    y: Optional[int]

    def __init__(self, label: int = 0, width: int = 1, height: int = 1):
        super(BlockNode, self).__init__()
        self.label = label
        self._width = width
        self._height = height
        self.x = None
        self.y = None

    @property
    def name(self) -> str:
        return f"Block {self.label}"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def area(self) -> int:
        return self._width * self._height

    def is_placed(self) -> bool:
        return self.x is not None and self.y is not None

    def place(self, x: int, y: int) -> "BlockNode":
        self.x = x
        self.y = y
        return self

    def structure_text(self) -> str:
        return f"{self.label}({self._width},{self._height})"

    def dimension_text(self) -> str:
        return self.structure_text()

    def placement_text(self) -> str:
        """The record for this block in the placement dump"""
        if not self.is_placed():
            raise ValueError(f"{self.name} has not been placed")
        return f"{self.label}(({self._width},{self._height})({self.x},{self.y}))"


class CutNode(SlicingNode):
    """A cut that divides its enclosing rectangle between exactly two children.
    The order of the children is significant."""

    left: SlicingNode
    right: SlicingNode

    _width: Optional[int]
    _height: Optional[int]

    def __init__(self, left: SlicingNode = None, right: SlicingNode = None):
        super(CutNode, self).__init__(left, right)
        self._width = None
        self._height = None

    @property
    def mark(self) -> str:
        raise NotImplementedError(self.name)

    @property
    def name(self) -> str:
        return "Cut"

    @property
    def width(self) -> int:
        if self._width is None:
            raise ValueError(f"{self.name} has not been measured")
        return self._width

    @property
    def height(self) -> int:
        if self._height is None:
            raise ValueError(f"{self.name} has not been measured")
        return self._height

    def is_measured(self) -> bool:
        return self._width is not None and self._height is not None

    def measure(self) -> "CutNode":
        if self.left is None or self.right is None:
            raise ValueError(f"{self.name} needs two children to be measured")
        self._width, self._height = self.combine(self.left, self.right)
        return self

    def combine(self, left: SlicingNode, right: SlicingNode) -> Tuple[int, int]:
        """Return the (width, height) of the smallest rectangle that holds both
        children arranged by this cut"""
        raise NotImplementedError(self.name)

    def structure_text(self) -> str:
        return self.mark

    def dimension_text(self) -> str:
        return f"{self.mark}({self.width},{self.height})"


class HorizontalCut(CutNode):
    """Stacks its children: `right` on the bottom, `left` on top of it."""

    @property
    def mark(self) -> str:
        return HORIZONTAL

    @property
    def name(self) -> str:
        return "Horizontal Cut"

    def combine(self, left: SlicingNode, right: SlicingNode) -> Tuple[int, int]:
        return max(left.width, right.width), left.height + right.height

    def child_origins(self, x: int, y: int) -> List[Tuple[SlicingNode, int, int]]:
        return [(self.left, x, y + self.right.height), (self.right, x, y)]


class VerticalCut(CutNode):
    """Places its children side by side: `left` then `right`."""

    @property
    def mark(self) -> str:
        return VERTICAL

    @property
    def name(self) -> str:
        return "Vertical Cut"

    def combine(self, left: SlicingNode, right: SlicingNode) -> Tuple[int, int]:
        return left.width + right.width, max(left.height, right.height)

    def child_origins(self, x: int, y: int) -> List[Tuple[SlicingNode, int, int]]:
        return [(self.left, x, y), (self.right, x + self.left.width, y)]


# Cut classes by marker
CUT_TYPES: Dict[str, Type[CutNode]] = {
    HORIZONTAL: HorizontalCut,
    VERTICAL: VerticalCut,
}
