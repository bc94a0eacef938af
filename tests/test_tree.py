"""Tests for tree materialization and its default view states."""
from cache_report.problem_report.tree import (
    Tree,
    ViewState,
    tree_from_trie,
    tree_model_for,
    tree_statistics,
)
from cache_report.problem_report.trie import Trie

EXPANDED = ViewState.EXPANDED
COLLAPSED = ViewState.COLLAPSED


def _walk(tree):
    yield tree
    for child in tree.children:
        yield from _walk(child)


def test_single_continuation_children_expand():
    tree = tree_model_for("root", [["a", "b", "c"]])

    assert tree == Tree(
        "root",
        (Tree("a", (Tree("b", (Tree("c", (), COLLAPSED),), EXPANDED),), EXPANDED),),
        EXPANDED,
    )


def test_branching_children_collapse():
    tree = tree_model_for("root", [["a", "x", "1"], ["a", "y", "2"]])

    a = tree.children[0]
    assert a.view_state is EXPANDED
    assert [child.view_state for child in a.children] == [COLLAPSED, COLLAPSED]
    # Leaves below stay collapsed
    assert [child.children[0].view_state for child in a.children] == [COLLAPSED, COLLAPSED]


def test_collapsed_branch_keeps_its_own_state_for_single_child_below():
    tree = tree_model_for("root", [["x", "1", "deep"], ["y"]])

    x = tree.children[0]
    assert x.label == "x"
    assert x.view_state is COLLAPSED
    assert x.children[0].view_state is EXPANDED
    assert x.children[0].children[0].view_state is COLLAPSED


def test_leaf_is_collapsed_whatever_the_requested_state():
    assert tree_from_trie("root", Trie.from_sequences([]), EXPANDED).view_state is COLLAPSED
    assert tree_model_for("root", []).view_state is COLLAPSED


def test_every_leaf_is_collapsed():
    tree = tree_model_for("root", [["a", "b"], ["a", "c", "d"], ["e"]])

    assert all(node.view_state is COLLAPSED for node in _walk(tree) if node.is_leaf)


def test_children_sorted_by_string_rendering():
    tree = tree_model_for("root", [["b"], ["a"], ["c"], [10], [2]])

    assert [child.label for child in tree.children] == [10, 2, "a", "b", "c"]


def test_order_independent_of_insertion_order():
    paths = [["m", "2"], ["a", "9"], ["m", "1"], ["z"]]

    assert tree_model_for("root", paths) == tree_model_for("root", list(reversed(paths)))


def test_materialization_is_idempotent():
    paths = [["a", "b"], ["a", "c"], ["d"]]
    trie = Trie.from_sequences(paths)

    assert tree_from_trie("r", trie, EXPANDED) == tree_from_trie("r", trie, EXPANDED)
    assert tree_model_for("r", paths) == tree_model_for("r", paths)


def test_tree_statistics():
    tree = tree_model_for("root", [["a", "b"], ["a", "c", "d"], ["e"]])

    assert tree_statistics(tree) == {"total_nodes": 5, "total_leaves": 3, "max_depth": 3}
    assert tree_statistics(tree_model_for("root", [])) == {
        "total_nodes": 0,
        "total_leaves": 0,
        "max_depth": 0,
    }


def test_leaf_and_expanded_are_properties():
    leaf = Tree("x", (), EXPANDED)
    branch = Tree("root", (Tree("x"),), EXPANDED)

    assert leaf.is_leaf is True
    assert branch.is_leaf is False
    assert branch.is_expanded is True
    assert Tree("x").is_expanded is False
