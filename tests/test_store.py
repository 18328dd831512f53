"""
File:       tests/test_store.py
Author:     Ivan Lazarević
Brief:      Unit tests for the Profile Store binary search tree.
"""
# Standard library imports
import os
import sys
import unittest
from typing import List, Optional

# Local modules imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), r".."))
from src.profile import Profile
from src.store import DuplicateNameError, ProfileStore, TreeNode


def _build_store(names: List[str], first_unknown: str = "", second_unknown: str = "") -> ProfileStore:
    store = ProfileStore(first_unknown, second_unknown)
    for name in names:
        store.insert(name, Profile.from_pairs([("AGAT", 1)]))
    return store


class TestProfileStore(unittest.TestCase):
    """Class for automated testing of the Profile Store"""

    #          Smith
    #         /     \
    #       Doe     Young
    #      /   \        \
    #   Brown  Eve      Zed
    #    /
    # Adams
    NAMES = ["Smith, John", "Doe, Jane", "Young, Carl", "Brown, Alice", "Eve, Adam", "Zed, Zoe", "Adams, Bob"]

    def _assert_valid_bst(self, node: Optional[TreeNode], low: Optional[str] = None, high: Optional[str] = None):
        if node is None:
            return
        if low is not None:
            self.assertLess(low, node.name)
        if high is not None:
            self.assertLess(node.name, high)
        self._assert_valid_bst(node.left, low, node.name)
        self._assert_valid_bst(node.right, node.name, high)

    def _assert_strictly_increasing(self, store: ProfileStore):
        names = list(store)
        for smaller, larger in zip(names, names[1:]):
            self.assertLess(smaller, larger)

    def test_empty_store(self):
        store = ProfileStore()
        self.assertIsNone(store.root)
        self.assertEqual(0, len(store))
        self.assertEqual(0, store.count_by_interest(True))
        self.assertEqual(0, store.count_by_interest(False))
        self.assertListEqual([], store.names_by_interest(False))
        self.assertEqual(0, store.flag_profiles_of_interest())
        self.assertListEqual([], store.cleanup_tree())
        store.remove_by_name("Doe, John")
        self.assertIsNone(store.root)

    def test_insert_shape(self):
        store = _build_store(self.NAMES)
        root = store.root
        self.assertEqual("Smith, John", root.name)
        self.assertEqual("Doe, Jane", root.left.name)
        self.assertEqual("Young, Carl", root.right.name)
        self.assertEqual("Brown, Alice", root.left.left.name)
        self.assertEqual("Eve, Adam", root.left.right.name)
        self.assertEqual("Zed, Zoe", root.right.right.name)
        self.assertIsNone(root.right.left)
        self.assertEqual("Adams, Bob", root.left.left.left.name)

    def test_in_order_is_sorted(self):
        store = _build_store(self.NAMES)
        self.assertListEqual(sorted(self.NAMES), list(store))
        self._assert_valid_bst(store.root)

    def test_level_order(self):
        store = _build_store(self.NAMES)
        expected = ["Smith, John", "Doe, Jane", "Young, Carl", "Brown, Alice", "Eve, Adam", "Zed, Zoe", "Adams, Bob"]
        self.assertListEqual(expected, [node.name for node in store.level_order()])

    def test_duplicate_name_is_rejected(self):
        store = _build_store(self.NAMES)
        original = Profile.from_pairs([("TATC", 7)])
        store.insert("Kim, Lee", original)
        with self.assertRaises(DuplicateNameError):
            store.insert("Kim, Lee", Profile())
        self.assertEqual(len(self.NAMES) + 1, len(store))
        self.assertIs(original, dict(store.in_order())["Kim, Lee"])

    def test_counts_add_up(self):
        store = _build_store(self.NAMES)
        store.root.profile.of_interest = True
        store.root.right.right.profile.of_interest = True
        self.assertEqual(2, store.count_by_interest(True))
        self.assertEqual(5, store.count_by_interest(False))
        self.assertEqual(len(self.NAMES), store.count_by_interest(True) + store.count_by_interest(False))

    def test_names_by_interest_in_level_order(self):
        store = _build_store(self.NAMES)
        store.root.left.profile.of_interest = True
        store.root.right.right.profile.of_interest = True
        self.assertListEqual(["Doe, Jane", "Zed, Zoe"], store.names_by_interest(True))
        unmarked = store.names_by_interest(False)
        self.assertListEqual(["Smith, John", "Young, Carl", "Brown, Alice", "Eve, Adam", "Adams, Bob"], unmarked)
        self.assertEqual(store.count_by_interest(False), len(unmarked))

    def test_remove_leaf(self):
        store = _build_store(self.NAMES)
        store.remove_by_name("Eve, Adam")
        self.assertIsNone(store.root.left.right)
        self.assertNotIn("Eve, Adam", list(store))
        self._assert_valid_bst(store.root)

    def test_remove_node_with_one_child(self):
        store = _build_store(self.NAMES)
        store.remove_by_name("Young, Carl")
        self.assertEqual("Zed, Zoe", store.root.right.name)
        store.remove_by_name("Brown, Alice")
        self.assertEqual("Adams, Bob", store.root.left.left.name)
        self.assertEqual(len(self.NAMES) - 2, len(store))
        self._assert_valid_bst(store.root)

    def test_remove_node_with_two_children(self):
        store = _build_store(self.NAMES)
        store.remove_by_name("Doe, Jane")
        self.assertEqual("Eve, Adam", store.root.left.name)
        self.assertIsNone(store.root.left.right)
        self.assertNotIn("Doe, Jane", list(store))
        self._assert_strictly_increasing(store)
        self._assert_valid_bst(store.root)

    def test_remove_root_with_two_children(self):
        store = _build_store(self.NAMES)
        root_profile = store.root.right.profile
        store.remove_by_name("Smith, John")
        self.assertEqual("Young, Carl", store.root.name)
        self.assertIs(root_profile, store.root.profile)
        self.assertEqual("Zed, Zoe", store.root.right.name)
        self.assertListEqual(sorted(set(self.NAMES) - {"Smith, John"}), list(store))
        self._assert_valid_bst(store.root)

    def test_remove_successor_with_right_child(self):
        store = _build_store(["M", "C", "T", "P", "X", "R"])
        store.remove_by_name("M")
        self.assertEqual("P", store.root.name)
        self.assertEqual("R", store.root.right.left.name)
        self.assertListEqual(["C", "P", "R", "T", "X"], list(store))
        self._assert_valid_bst(store.root)

    def test_remove_absent_name(self):
        store = _build_store(self.NAMES)
        store.remove_by_name("Nobody, Here")
        self.assertListEqual(sorted(self.NAMES), list(store))

    def test_remove_everything(self):
        store = _build_store(self.NAMES)
        for name in reversed(self.NAMES):
            store.remove_by_name(name)
            self._assert_valid_bst(store.root)
        self.assertIsNone(store.root)
        self.assertEqual(0, len(store))

    def test_cleanup_tree(self):
        store = _build_store(self.NAMES)
        store.root.profile.of_interest = True
        store.root.left.profile.of_interest = True
        store.root.left.left.left.profile.of_interest = True
        removed = store.cleanup_tree()
        self.assertListEqual(["Young, Carl", "Brown, Alice", "Eve, Adam", "Zed, Zoe"], removed)
        self.assertEqual(0, store.count_by_interest(False))
        self.assertListEqual(["Adams, Bob", "Doe, Jane", "Smith, John"], list(store))
        self._assert_valid_bst(store.root)

    def test_flag_profiles_of_interest(self):
        store = ProfileStore("AGGTCCTACTG", "GGATAC")
        store.insert("Doe, John", Profile.from_pairs([("GG", 1)]))
        store.insert("Roe, Jane", Profile.from_pairs([("GG", 2), ("TAC", 2), ("CC", 5)]))
        store.insert("Lee, Ann", Profile())
        self.assertEqual(2, store.flag_profiles_of_interest())
        self.assertListEqual(["Doe, John"], store.names_by_interest(False))

    def test_flagging_twice_gives_same_result(self):
        store = ProfileStore("AGGTCCTACTG", "GGATAC")
        store.insert("Doe, John", Profile.from_pairs([("GG", 1), ("TAC", 2), ("CC", 1)]))
        store.insert("Roe, Jane", Profile.from_pairs([("GG", 3), ("TAC", 0)]))
        store.insert("Lee, Ann", Profile.from_pairs([("GG", 2)]))
        store.flag_profiles_of_interest()
        flagged_once = store.names_by_interest(True)
        store.flag_profiles_of_interest()
        self.assertListEqual(flagged_once, store.names_by_interest(True))
        self.assertListEqual(["Doe, John", "Lee, Ann"], sorted(flagged_once))

    def test_unknowns(self):
        store = ProfileStore("AGGTCCTACTG", "GGATAC")
        self.assertEqual("AGGTCCTACTG", store.first_unknown)
        self.assertEqual("GGATAC", store.second_unknown)


if __name__ == "__main__":
    unittest.main(argv=[""], verbosity=2, exit=False)
