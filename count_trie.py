"""
Prefix-counting trie for character n-gram statistics.

Every node remembers how many inserted sequences passed through it, so a
single structure answers "which characters followed this prefix, and how
often" for any prefix up to the trained depth.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional


class CountTrieError(LookupError):
    """Base class for failed next-character queries."""

    def __init__(self, message: str, remaining: str):
        super().__init__(message)
        self.remaining = remaining


class PrefixTooLongError(CountTrieError):
    """The trie ran out of nodes before the prefix was consumed."""

    def __init__(self, remaining: str):
        super().__init__(f"Prefix exceeds trie depth: {remaining!r}", remaining)


class NoNextChildError(CountTrieError):
    """The next prefix character is not among the node's children."""

    def __init__(self, remaining: str):
        super().__init__(f"No match in node's children for next char: {remaining!r}", remaining)


class CountTrie:
    """Trie node carrying the number of inserts that passed through it."""

    __slots__ = ("label", "count", "_children")

    def __init__(self, label: str = "^"):
        self.label = label
        self.count = 0
        # dicts keep insertion order, which is the child discovery order
        self._children: Dict[str, "CountTrie"] = {}

    @property
    def children(self) -> Mapping[str, "CountTrie"]:
        """Read-only view of the children, in discovery order."""
        return MappingProxyType(self._children)

    def child(self, char: str) -> Optional["CountTrie"]:
        return self._children.get(char)

    def insert(self, sequence: str) -> None:
        """Count `sequence` once on this node and on every node along its path."""
        node = self
        node.count += 1
        for char in sequence:
            child = node._children.get(char)
            if child is None:
                child = node._children[char] = CountTrie(char)
            node = child
            node.count += 1

    def node_for(self, prefix: str) -> "CountTrie":
        """
        Walk `prefix` from this node and return the node it ends on.

        Raises PrefixTooLongError when a leaf is reached with characters
        left over, NoNextChildError when the next character was never seen.
        """
        node = self
        for i, char in enumerate(prefix):
            if not node._children:
                raise PrefixTooLongError(prefix[i:])
            child = node._children.get(char)
            if child is None:
                raise NoNextChildError(prefix[i:])
            node = child
        return node

    def next_character_counts(self, prefix: str) -> Dict[str, int]:
        """Distribution of the characters observed right after `prefix`."""
        node = self.node_for(prefix)
        return {char: child.count for char, child in node._children.items()}

    def depth(self) -> int:
        """Height of this subtree in characters (0 for a leaf)."""
        deepest = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in node._children.values():
                stack.append((child, level + 1))
        return deepest

    def __len__(self) -> int:
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node._children.values())
        return total

    def __eq__(self, other) -> bool:
        if not isinstance(other, CountTrie):
            return NotImplemented
        # child order is not part of equality, only labels and counts
        return (
            self.label == other.label
            and self.count == other.count
            and self._children == other._children
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"CountTrie(label={self.label!r}, count={self.count}, children={list(self._children)})"
