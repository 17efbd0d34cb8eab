#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_binary_search_tree_properties.py
-------------------------------------

Property-based checks for BinarySearchTree, driven by hypothesis:

* traversal equals the sorted multiset of inserted keys
* walking successor links from the minimum visits every key in order
* removing any one node leaves the sorted remainder
* parent links stay consistent through insertions and removals
"""

import unittest

from hypothesis import given, strategies as st

from binary_search_tree import BinarySearchTree, depth, successor

keys = st.lists(st.integers(min_value=-1000, max_value=1000))
small_keys = st.lists(st.integers(min_value=-20, max_value=20), min_size=1)


class TestBinarySearchTreeProperties(unittest.TestCase):
    @given(keys)
    def test_traversal_is_sorted_input(self, init):
        bst = BinarySearchTree(init)
        self.assertEqual(bst.traverse_in_order(), sorted(init))
        bst.validate()

    @given(keys)
    def test_successor_walk(self, init):
        bst = BinarySearchTree(init)
        visited = []
        node = bst.minimum()
        while node.exists:
            visited.append(node.key)
            node = successor(node)
        self.assertEqual(visited, sorted(init))

    @given(small_keys, st.data())
    def test_remove_one_keeps_order(self, init, data):
        bst = BinarySearchTree(init)
        target = data.draw(st.sampled_from(init))

        bst.remove(bst.find(target))

        expected = sorted(init)
        expected.remove(target)
        self.assertEqual(bst.traverse_in_order(), expected)
        bst.validate()

    @given(small_keys, st.data())
    def test_remove_until_empty(self, init, data):
        bst = BinarySearchTree(init)
        remaining = list(init)
        while remaining:
            target = data.draw(st.sampled_from(remaining))
            bst.remove(bst.find(target))
            remaining.remove(target)
            bst.validate()
            self.assertEqual(bst.traverse_in_order(), sorted(remaining))
        self.assertFalse(bst.root.exists)

    @given(keys)
    def test_deepest_depth_is_tree_height(self, init):
        bst = BinarySearchTree(init)
        result = bst.deepest()
        if not init:
            self.assertEqual(result, ([], 0))
            return

        heights = []
        stack = [bst.root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                heights.append(depth(node))
            for child in (node.left, node.right):
                if child.exists:
                    stack.append(child)
        self.assertEqual(result.depth, max(heights))
        self.assertEqual(len(result.keys), heights.count(max(heights)))


if __name__ == "__main__":
    unittest.main(verbosity=2)
