"""
File:       src/store.py
Author:     Ivan Lazarević
Brief:      The Profile Store, a binary search tree of profiles keyed by name.
"""
# Standard library imports
from collections import deque
from typing import Iterator, List, Optional, Tuple

# Local modules imports
from src.matching import MatchingEngine
from src.profile import Profile
from src.utils import time_it


class DuplicateNameError(ValueError):
    """Raised when a name that is already stored is inserted again"""


class TreeNode:
    """A tree node owns its name (the key), its profile (the value), and both of its subtrees."""

    __slots__ = ("name", "profile", "left", "right")

    def __init__(self, name: str, profile: Profile,
                 left: Optional["TreeNode"] = None, right: Optional["TreeNode"] = None) -> None:
        self.name = name
        self.profile = profile
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ProfileStore:
    """ A binary search tree of profiles, ordered lexicographically by name.

        Names are "Last, First" and must be unique.
        There is no rebalancing: the shape of the tree is determined by the insertion order.
        Recursive insertion and deletion return the (possibly new) root of a subtree,
        and the caller rebinds its child slot to it.

        The two unknown sequences are set once, at construction, and are read-only afterwards.
        The store is not thread-safe; callers have to serialize access to it.
    """

    def __init__(self, first_unknown: str = "", second_unknown: str = "") -> None:
        self._root: Optional[TreeNode] = None
        self._first_unknown = first_unknown
        self._second_unknown = second_unknown

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    @property
    def first_unknown(self) -> str:
        return self._first_unknown

    @property
    def second_unknown(self) -> str:
        return self._second_unknown

    def __len__(self) -> int:
        return sum(1 for _ in self.level_order())

    def __iter__(self) -> Iterator[str]:
        """Iterate over names in ascending order"""
        return (name for name, _ in self.in_order())

    # Insertion

    def insert(self, name: str, profile: Profile) -> None:
        """ Insert the (`name`, `profile`) pair as a new leaf.

            Raises `DuplicateNameError` if `name` is already stored, in which case the tree isn't changed.
        """
        self._root = self._insert(self._root, name, profile)

    def _insert(self, node: Optional[TreeNode], name: str, profile: Profile) -> TreeNode:
        if node is None:
            return TreeNode(name, profile)
        if name < node.name:
            node.left = self._insert(node.left, name, profile)
        elif name > node.name:
            node.right = self._insert(node.right, name, profile)
        else:
            raise DuplicateNameError(f"'{name}' is already in the store")
        return node

    # Traversals

    def in_order(self) -> Iterator[Tuple[str, Profile]]:
        """Yield (name, profile) pairs in ascending name order"""
        yield from self._in_order(self._root)

    def _in_order(self, node: Optional[TreeNode]) -> Iterator[Tuple[str, Profile]]:
        if node is None:
            return
        yield from self._in_order(node.left)
        yield node.name, node.profile
        yield from self._in_order(node.right)

    def level_order(self) -> Iterator[TreeNode]:
        """Yield nodes breadth-first: the root, then its left child, then its right child, and so on."""
        if self._root is None:
            return
        queue = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    # Queries by flag

    def count_by_interest(self, is_of_interest: bool) -> int:
        """Return the number of profiles whose flag equals `is_of_interest`"""
        return sum(1 for node in self.level_order() if node.profile.of_interest == is_of_interest)

    def names_by_interest(self, is_of_interest: bool) -> List[str]:
        """Return the names of profiles whose flag equals `is_of_interest`, in level order"""
        return [node.name for node in self.level_order() if node.profile.of_interest == is_of_interest]

    # Matching

    @time_it
    def flag_profiles_of_interest(self) -> int:
        """ Flag every stored profile that matches the unknown sequences.

            Flags are only ever set, never reset.
            Returns the number of flagged profiles in the store afterwards.
        """
        engine = MatchingEngine(self._first_unknown, self._second_unknown)
        return engine.flag_profiles(profile for _, profile in self.in_order())

    # Deletion

    def remove_by_name(self, name: str) -> None:
        """Remove the profile stored under `name`; do nothing if there's no such name."""
        self._root = self._remove(self._root, name)

    def _remove(self, node: Optional[TreeNode], name: str) -> Optional[TreeNode]:
        if node is None:
            return None
        if name < node.name:
            node.left = self._remove(node.left, name)
        elif name > node.name:
            node.right = self._remove(node.right, name)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            # Two children: take over the in-order successor's pair, then splice the successor out.
            successor = self._min_node(node.right)
            node.name = successor.name
            node.profile = successor.profile
            node.right = self._remove_min(node.right)
        return node

    @staticmethod
    def _min_node(node: TreeNode) -> TreeNode:
        while node.left is not None:
            node = node.left
        return node

    def _remove_min(self, node: TreeNode) -> Optional[TreeNode]:
        """Splice out the leftmost node of the subtree and return the subtree's new root"""
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return node

    @time_it
    def cleanup_tree(self) -> List[str]:
        """ Remove every profile that is not flagged of interest and return the removed names.

            The names are collected in full before the first removal.
        """
        unmarked = self.names_by_interest(False)
        for name in unmarked:
            self.remove_by_name(name)
        return unmarked
