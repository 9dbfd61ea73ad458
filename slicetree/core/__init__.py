from .emitters import (
    to_dimension_lines,
    to_placement_lines,
    to_postorder_lines,
    to_structure_lines,
)
from .layout import FloorplanLayout, FloorplanMeasurement
from .nodes import (
    CUT_TYPES,
    HORIZONTAL,
    VERTICAL,
    BlockNode,
    CutNode,
    HorizontalCut,
    SlicingNode,
    VerticalCut,
)
from .parser import (
    DEFAULT_MAX_NODES,
    CapacityExceeded,
    EmptyTree,
    InvalidToken,
    LineTooLong,
    MissingOperands,
    ParserException,
    SlicingTreeParser,
    TrailingNodes,
)
from .tokenizer import DEFAULT_MAX_LINE_LENGTH, Token, Tokenizer
from .tree import STOP, BinaryTreeNode
