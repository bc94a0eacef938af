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
Prefix Trie

Merges label sequences sharing a common prefix into shared paths. Built in
two phases: a TrieBuilder accepts insertions, then `freeze()` hands out an
immutable Trie for reading.
"""

from types import MappingProxyType
from typing import (
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
)

T = TypeVar("T", bound=Hashable)


class Trie(Generic[T]):
    """Read-only trie node. Children keep insertion order."""

    __slots__ = ("_children",)

    def __init__(self, children: Mapping[T, "Trie[T]"]):
        self._children = MappingProxyType(dict(children))

    @classmethod
    def from_sequences(cls, sequences: Iterable[Sequence[T]]) -> "Trie[T]":
        """Build a trie from all sequences at once"""
        builder: TrieBuilder[T] = TrieBuilder()
        for sequence in sequences:
            builder.insert(sequence)
        return builder.freeze()

    @property
    def size(self) -> int:
        """Number of distinct immediate children"""
        return len(self._children)

    @property
    def children(self) -> Mapping[T, "Trie[T]"]:
        return self._children

    @property
    def entries(self) -> Iterator[Tuple[T, "Trie[T]"]]:
        return iter(self._children.items())

    def __len__(self) -> int:
        return self.size

    def __contains__(self, label: object) -> bool:
        return label in self._children

    def __getitem__(self, label: T) -> "Trie[T]":
        return self._children[label]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return dict(self._children) == dict(other._children)

    def __repr__(self) -> str:
        return f"Trie({dict(self._children)!r})"


class TrieBuilder(Generic[T]):
    """Mutable trie used only while inserting"""

    def __init__(self):
        self._children: Dict[T, "TrieBuilder[T]"] = {}

    def insert(self, sequence: Sequence[T]) -> None:
        """Add one path, reusing nodes whose label is equal at the same depth"""
        node = self
        for label in sequence:
            child = node._children.get(label)
            if child is None:
                child = TrieBuilder()
                node._children[label] = child
            node = child

    def freeze(self) -> Trie[T]:
        return Trie(
            {label: child.freeze() for label, child in self._children.items()}
        )
