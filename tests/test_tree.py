import gc
import weakref

from practicekit.tree import Node


def test_new_node_has_no_parent_or_children():
    leaf = Node(2)
    assert leaf.parent is None
    assert leaf.children == []


def test_add_child_links_both_ways():
    leaf = Node(1)
    root = Node(2)
    returned = root.add_child(leaf)
    assert returned is leaf
    assert leaf.parent is root
    assert root.children == [leaf]


def test_children_given_to_constructor():
    leaf = Node(1)
    root = Node(2, [leaf])
    assert leaf.parent is root
    assert [child.value for child in root.children] == [1]


def test_parent_does_not_outlive_its_scope():
    leaf = Node(1)

    def build():
        root = Node(2, [leaf])
        assert leaf.parent is root
        assert leaf.parent.value == 2

    build()
    gc.collect()
    assert leaf.parent is None


def test_child_is_kept_alive_by_parent():
    root = Node(2)
    root.add_child(Node(1))
    child_ref = weakref.ref(root.children[0])
    gc.collect()
    assert child_ref() is not None
    assert child_ref().value == 1


def test_weak_reference_dies_with_node():
    node = Node(5)
    ref = weakref.ref(node)
    assert ref().value == 5
    del node
    gc.collect()
    assert ref() is None