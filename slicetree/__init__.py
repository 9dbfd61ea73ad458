from .about import __version__
from .api import Floorplan, FloorplanResult
from .config import FloorplanConfig
from .core.emitters import (
    to_dimension_lines,
    to_placement_lines,
    to_postorder_lines,
    to_structure_lines,
)
from .core.layout import FloorplanLayout, FloorplanMeasurement
from .core.nodes import BlockNode, CutNode, HorizontalCut, SlicingNode, VerticalCut
from .core.parser import ParserException, SlicingTreeParser
