# Copyright (c) Nex-AGI. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Report Tree

Materializes a Trie into a display tree with an initial expanded/collapsed
state per node:

- children of a node with a single continuation start expanded,
- children of a branching node start collapsed,
- leaves always start collapsed.

Children are ordered by the string rendering of their labels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Dict,
    Generic,
    Hashable,
    Iterable,
    List,
    Sequence,
    Tuple,
    TypeVar,
)

from .trie import Trie

T = TypeVar("T", bound=Hashable)


class ViewState(Enum):
    """Initial display state of a tree node"""

    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


@dataclass(frozen=True)
class Tree(Generic[T]):
    label: T
    children: Tuple["Tree[T]", ...] = ()
    view_state: ViewState = ViewState.COLLAPSED

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    @property
    def is_expanded(self) -> bool:
        return self.view_state is ViewState.EXPANDED


def tree_from_trie(label: T, trie: Trie[T], state: ViewState) -> Tree[T]:
    """
    Build the tree rooted at `label` over `trie`.

    `state` applies to this node unless it has no children, in which case
    it is collapsed.
    """
    sub_tree_state = ViewState.EXPANDED if trie.size == 1 else ViewState.COLLAPSED
    return Tree(
        label,
        sub_trees_from_trie(trie, sub_tree_state),
        ViewState.COLLAPSED if trie.size == 0 else state,
    )


def sub_trees_from_trie(trie: Trie[T], state: ViewState) -> Tuple[Tree[T], ...]:
    return tuple(
        tree_from_trie(label, sub_trie, state)
        for label, sub_trie in sorted(trie.entries, key=lambda entry: str(entry[0]))
    )


def tree_model_for(label: T, sequences: Iterable[Sequence[T]]) -> Tree[T]:
    """Group all sequences under an expanded root labelled `label`"""
    return tree_from_trie(label, Trie.from_sequences(sequences), ViewState.EXPANDED)


def tree_statistics(tree: Tree[Any]) -> Dict[str, int]:
    """Count nodes, leaves and depth below the root"""
    total_nodes = 0
    total_leaves = 0
    max_depth = 0

    stack: List[Tuple[Tree[Any], int]] = [(child, 1) for child in tree.children]
    while stack:
        node, depth = stack.pop()
        total_nodes += 1
        max_depth = max(max_depth, depth)
        if node.is_leaf:
            total_leaves += 1
        stack.extend((child, depth + 1) for child in node.children)

    return {
        "total_nodes": total_nodes,
        "total_leaves": total_leaves,
        "max_depth": max_depth,
    }
