import pytest

from slicetree.core.emitters import (
    to_dimension_lines,
    to_placement_lines,
    to_postorder_lines,
    to_structure_lines,
)
from slicetree.core.layout import FloorplanLayout
from slicetree.core.nodes import BlockNode, HorizontalCut, VerticalCut
from slicetree.core.parser import SlicingTreeParser

EXAMPLE = ["1(2,3)", "2(4,1)", "V"]


def test_emitters_example():
    root = SlicingTreeParser().parse_lines(EXAMPLE)
    assert to_structure_lines(root) == ["V", "1(2,3)", "2(4,1)"]
    FloorplanLayout().measure(root)
    assert to_dimension_lines(root) == ["1(2,3)", "2(4,1)", "V(6,3)"]
    FloorplanLayout().transform(root)
    assert to_placement_lines(root) == ["1((2,3)(0,0))", "2((4,1)(2,0))"]


def test_emitters_nested():
    root = SlicingTreeParser().parse_lines(
        ["1(3,4)", "2(5,2)", "H", "3(2,7)", "V", "4(10,1)", "H"]
    )
    assert to_structure_lines(root) == [
        "H",
        "V",
        "H",
        "1(3,4)",
        "2(5,2)",
        "3(2,7)",
        "4(10,1)",
    ]
    FloorplanLayout().layout(root)
    assert to_dimension_lines(root) == [
        "1(3,4)",
        "2(5,2)",
        "H(5,6)",
        "3(2,7)",
        "V(7,7)",
        "4(10,1)",
        "H(10,8)",
    ]
    assert to_placement_lines(root) == [
        "1((3,4)(0,3))",
        "2((5,2)(0,1))",
        "3((2,7)(5,1))",
        "4((10,1)(0,0))",
    ]


def test_emitters_structure_before_measure():
    """the structure dump does not need dimensions"""
    root = HorizontalCut(BlockNode(1, 3, 4), BlockNode(2, 5, 2))
    assert to_structure_lines(root) == ["H", "1(3,4)", "2(5,2)"]
    with pytest.raises(ValueError):
        to_dimension_lines(root)


def test_emitters_placement_requires_layout():
    root = VerticalCut(BlockNode(1, 3, 4), BlockNode(2, 5, 2))
    FloorplanLayout().measure(root)
    with pytest.raises(ValueError):
        to_placement_lines(root)


def test_emitters_leaf_dimensions_match_input():
    root = SlicingTreeParser().parse_lines(EXAMPLE)
    FloorplanLayout().layout(root)
    leaves = [line for line in to_dimension_lines(root) if line[0].isdigit()]
    assert leaves == EXAMPLE[:2]


def test_emitters_postorder_matches_input():
    lines = ["1(3,4)", "2(5,2)", "H", "3(2,7)", "V", "4(10,1)", "H"]
    root = SlicingTreeParser().parse_lines(lines)
    assert to_postorder_lines(root) == lines
    # cut lines are normalized to their marker
    root = SlicingTreeParser().parse_lines(["1(1,1)", "2(1,1)", "Vertical"])
    assert to_postorder_lines(root) == ["1(1,1)", "2(1,1)", "V"]
