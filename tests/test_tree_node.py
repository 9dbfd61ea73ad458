import pytest

from slicetree.core.tree import STOP, BinaryTreeNode


class NamedNode(BinaryTreeNode):
    def __init__(self, key: str, left=None, right=None):
        super(NamedNode, self).__init__(left, right)
        self.key = key


def make_tree() -> NamedNode:
    """
            a
          /   \\
         b     c
        / \\
       d   e
    """
    return NamedNode("a", NamedNode("b", NamedNode("d"), NamedNode("e")), NamedNode("c"))


def visit_keys(tree: BinaryTreeNode, method: str):
    result = []

    def node_visit(node, depth, data):
        result.append((node.key, depth))

    getattr(tree, method)(node_visit)
    return result


def test_tree_node_constructor():
    """verify that the children passed in the constructor are properly assigned,
    and that children keep no reference back to their parent."""
    left = BinaryTreeNode()
    right = BinaryTreeNode()
    tree = BinaryTreeNode(left, right)
    assert tree.left is left and tree.right is right
    assert not hasattr(left, "parent")
    count = 0

    def node_visit(node, depth, data):
        nonlocal count
        count = count + 1

    tree.visit_preorder(node_visit)
    assert count == 3


def test_tree_node_visit_preorder():
    assert visit_keys(make_tree(), "visit_preorder") == [
        ("a", 0),
        ("b", 1),
        ("d", 2),
        ("e", 2),
        ("c", 1),
    ]


def test_tree_node_visit_postorder():
    assert visit_keys(make_tree(), "visit_postorder") == [
        ("d", 2),
        ("e", 2),
        ("b", 1),
        ("c", 1),
        ("a", 0),
    ]


def test_tree_node_visit_data():
    tree = make_tree()
    seen = []

    def node_visit(node, depth, data):
        data.append(node.key)

    tree.visit_postorder(node_visit, data=seen)
    assert seen == ["d", "e", "b", "c", "a"]


def test_tree_node_visit_stop():
    """Verify that tree visits can be stopped by returning the STOP constant"""
    tree = make_tree()
    total = 0

    def visit(node, depth, data):
        nonlocal total
        total += 1
        if node.key == "d":
            return STOP

    assert tree.visit_preorder(visit) == STOP
    # preorder stops at the third node
    assert total == 3

    total = 0
    assert tree.visit_postorder(visit) == STOP
    # postorder stops at first node
    assert total == 1

    assert tree.visit_preorder(lambda n, d, _: None) is None
    assert tree.visit_postorder(lambda n, d, _: None) is None


def test_tree_node_visit_deep_tree():
    """Degenerate trees deeper than the recursion limit can still be visited"""
    tree = NamedNode("0")
    for i in range(1, 5000):
        tree = NamedNode(str(i), tree, NamedNode(f"leaf-{i}"))
    count = 0
    max_depth = 0

    def node_visit(node, depth, data):
        nonlocal count, max_depth
        count += 1
        max_depth = max(max_depth, depth)

    tree.visit_postorder(node_visit)
    assert count == 9999
    assert max_depth == 4999
    count = 0
    tree.visit_preorder(node_visit)
    assert count == 9999


def test_tree_node_set_children():
    one = BinaryTreeNode()
    two = BinaryTreeNode()
    three = BinaryTreeNode()
    assert one.set_left(two) is one
    assert one.set_right(three) is one
    assert one.left is two and one.right is three
    with pytest.raises(ValueError):
        # Cannot set self to child
        one.set_left(one)
    with pytest.raises(ValueError):
        one.set_right(one)
